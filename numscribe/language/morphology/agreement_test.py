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

"""Test for `numscribe.language.morphology.agreement`."""

from absl.testing import absltest
from absl.testing import parameterized
from numscribe.language.morphology import agreement
from numscribe.language.morphology import grammar
from numscribe.language.morphology import test_utils

FormKey = grammar.FormKey
Gender = grammar.Gender
GrammaticalContext = grammar.GrammaticalContext
Position = grammar.Position
Slot = grammar.Slot
WordClass = grammar.WordClass

_FEMININE_NOUN = WordClass(Gender.FEMININE, "noun")
_MASCULINE_NOUN = WordClass(Gender.MASCULINE, "noun")
_PLAIN_NOUN = WordClass(Gender.NONE, "noun")


class AgreementTest(parameterized.TestCase):

  def setUp(self):
    super().setUp()
    self.table = test_utils.synthetic_table(
        unit_forms={
            "feminine": {"1": "U1F", "2": "U2F"},
            "combining": {"1": "U1C"},
            "attributive": {"1": "U1A"},
        },
        tens_combining=["", "", "TWC", "", "", "", "", "", "", ""],
    )

  @parameterized.parameters(
      (1, GrammaticalContext.standalone(), FormKey.DEFAULT),
      (1, GrammaticalContext.standalone(Gender.FEMININE), FormKey.FEMININE),
      (2, GrammaticalContext.before(_FEMININE_NOUN), FormKey.FEMININE),
      (1, GrammaticalContext.before(_MASCULINE_NOUN), FormKey.ATTRIBUTIVE),
      (1, GrammaticalContext.before(_PLAIN_NOUN, Position.PRE_SCALE),
       FormKey.ATTRIBUTIVE),
      (2, GrammaticalContext.before(_MASCULINE_NOUN), FormKey.DEFAULT),
      (3, GrammaticalContext.before(_FEMININE_NOUN), FormKey.DEFAULT),
  )
  def test_final_unit(self, value, context, expected):
    self.assertEqual(
        agreement.resolve_form(value, Slot.UNIT, context, self.table),
        expected,
    )

  def test_following_word_wins_over_gender(self):
    context = GrammaticalContext(
        gender=Gender.MASCULINE, position=Position.MODIFIER,
        following=_FEMININE_NOUN,
    )
    self.assertEqual(
        agreement.word_for(1, Slot.UNIT, context, self.table), "U1F"
    )

  def test_non_final(self):
    context = GrammaticalContext.before(_FEMININE_NOUN)
    self.assertEqual(
        agreement.resolve_form(1, Slot.UNIT, context, self.table, final=False),
        FormKey.COMBINING,
    )
    # No combining variant for two, gender does not apply to non-final words.
    self.assertEqual(
        agreement.resolve_form(2, Slot.UNIT, context, self.table, final=False),
        FormKey.DEFAULT,
    )
    self.assertEqual(
        agreement.word_for(
            2, Slot.TEN, GrammaticalContext.standalone(), self.table,
            final=False,
        ),
        "TWC",
    )
    self.assertEqual(
        agreement.word_for(
            2, Slot.TEN, GrammaticalContext.standalone(), self.table
        ),
        "TW",
    )

  def test_deterministic(self):
    context = GrammaticalContext.before(_FEMININE_NOUN, Position.PRE_SCALE)
    keys = {
        agreement.resolve_form(1, Slot.UNIT, context, self.table)
        for _ in range(10)
    }
    self.assertEqual(keys, {FormKey.FEMININE})

  def test_select_plural(self):
    self.assertEqual(
        agreement.select_plural(1, self.table), grammar.PluralCategory.ONE
    )
    table = test_utils.synthetic_table(plural_rule="east_slavic")
    self.assertEqual(
        agreement.select_plural(23, table), grammar.PluralCategory.FEW
    )
    self.assertEqual(
        agreement.select_plural(13, table), grammar.PluralCategory.MANY
    )


if __name__ == "__main__":
  absltest.main()
