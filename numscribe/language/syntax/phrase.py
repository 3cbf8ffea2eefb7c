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

"""Definition of simple phrases."""

from numscribe.language.morphology import agreement
from numscribe.language.morphology import grammar
from numscribe.language.morphology import numbers as numbers_lib
from numscribe.language.morphology import rule_table


class CountedNoun:
  """Verbalize noun phrases of the form number noun.

  The number agrees in gender with the noun and the noun takes the form
  selected by the plural rule of the language.
  """

  def __init__(
      self, numbers: numbers_lib.Numbers, noun: rule_table.UnitName
  ) -> None:
    self._numbers = numbers
    self._noun = noun

  def number_type(self, count: int) -> grammar.PluralCategory:
    return agreement.select_plural(count, self._numbers.table)

  def noun_form(self, count: int) -> str:
    return self._noun.form(self.number_type(count))

  def verbalize(self, count: int, include_and: bool | None = None) -> str:
    context = grammar.GrammaticalContext.before(
        self._noun.word_class, grammar.Position.MODIFIER
    )
    number = self._numbers.verbalize(
        count, context=context, include_and=include_and
    )
    return f"{number} {self.noun_form(count)}"
