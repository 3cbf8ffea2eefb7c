# Copyright 2025 The Numscribe Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Selection of numeral word forms from grammatical context.

The form of each numeral word is decided before rendering from the context
supplied by the caller, never by inspecting already rendered text. Only the
values for which the rule table lists variants are affected, all other values
use their default form.
"""

from numscribe.language.morphology import grammar
from numscribe.language.morphology import rule_table as rule_table_lib

FormKey = grammar.FormKey
GrammaticalContext = grammar.GrammaticalContext
Slot = grammar.Slot


def resolve_form(
    value: int,
    slot: Slot,
    context: GrammaticalContext,
    table: rule_table_lib.RuleTable,
    final: bool = True,
) -> FormKey:
  """Decides which lexical variant of a numeral word to use.

  Args:
    value: Digit (or, for teens-free tables, the value) of the word.
    slot: Which numeral word of the chunk this is.
    context: Context of the whole chunk.
    table: Rule table.
    final: Whether the word is the last numeral word of its chunk.

  Returns:
    Form key. The table is guaranteed to have the word under this key unless
    the key is `DEFAULT`.
  """
  variants = table.variants(slot)
  if not final:
    if value in variants.get(FormKey.COMBINING, {}):
      return FormKey.COMBINING
    return FormKey.DEFAULT

  gender_key = grammar.GENDER_FORM_KEYS.get(context.agreement_gender)
  if gender_key is not None and value in variants.get(gender_key, {}):
    return gender_key
  if (
      context.position != grammar.Position.STANDALONE
      and value in variants.get(FormKey.ATTRIBUTIVE, {})
  ):
    return FormKey.ATTRIBUTIVE
  return FormKey.DEFAULT


def word_for(
    value: int,
    slot: Slot,
    context: GrammaticalContext,
    table: rule_table_lib.RuleTable,
    final: bool = True,
) -> str:
  """Returns the numeral word for a digit in the given context."""
  key = resolve_form(value, slot, context, table, final=final)
  if key == FormKey.DEFAULT:
    return table.base_word(slot, value)
  return table.variants(slot)[key][value]


def select_plural(
    count: int, table: rule_table_lib.RuleTable
) -> grammar.PluralCategory:
  """Maps a count to the plural category used by nouns following it."""
  return grammar.plural_category(table.plural_rule, count)
