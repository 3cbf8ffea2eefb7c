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

"""Test for `numscribe.language.syntax.phrase`."""

from absl import logging
from absl.testing import absltest
from absl.testing import parameterized
from numscribe.language.morphology import grammar
from numscribe.language.morphology import numbers
from numscribe.language.morphology import rule_table
from numscribe.language.morphology import test_utils
from numscribe.language.syntax import phrase

Gender = grammar.Gender
PluralCategory = grammar.PluralCategory

_COIN = rule_table.UnitName(
    forms={PluralCategory.ONE: "coin", PluralCategory.OTHER: "coins"},
)
_BOX = rule_table.UnitName(
    forms={
        PluralCategory.ONE: "box",
        PluralCategory.FEW: "boxy",
        PluralCategory.MANY: "boxen",
    },
    word_class=grammar.WordClass(Gender.FEMININE, "box"),
)


class CountedNounTest(parameterized.TestCase):

  @parameterized.parameters(
      (1, "U1 coin"),
      (2, "U2 coins"),
      (21, "TW U1 coins"),
      (1000, "THOU coins"),
  )
  def test_verbalize(self, count, expected):
    noun_phrase = phrase.CountedNoun(
        numbers.Numbers(test_utils.synthetic_table()), _COIN
    )
    self.assertEqual(noun_phrase.verbalize(count), expected)

  def test_include_and(self):
    noun_phrase = phrase.CountedNoun(
        numbers.Numbers(test_utils.synthetic_table()), _COIN
    )
    self.assertEqual(
        noun_phrase.verbalize(1005, include_and=True), "THOU and U5 coins"
    )

  @parameterized.parameters(
      (1, "U1F box", PluralCategory.ONE),
      (2, "U2F boxy", PluralCategory.FEW),
      (5, "U5 boxen", PluralCategory.MANY),
      (12, "T12 boxen", PluralCategory.MANY),
      (22, "TW U2F boxy", PluralCategory.FEW),
      (101, "U1 HUND U1F box", PluralCategory.ONE),
  )
  def test_agreement(self, count, expected, category):
    table = test_utils.synthetic_table(
        unit_forms={"feminine": {"1": "U1F", "2": "U2F"}},
        plural_rule="east_slavic",
    )
    noun_phrase = phrase.CountedNoun(numbers.Numbers(table), _BOX)
    self.assertEqual(noun_phrase.number_type(count), category)
    verbalization = noun_phrase.verbalize(count)
    logging.info("%d -> %s", count, verbalization)
    self.assertEqual(verbalization, expected)

  def test_attributive_form(self):
    table = test_utils.synthetic_table(
        unit_forms={"attributive": {"1": "U1A"}}
    )
    noun_phrase = phrase.CountedNoun(numbers.Numbers(table), _COIN)
    self.assertEqual(noun_phrase.verbalize(1), "U1A coin")
    self.assertEqual(noun_phrase.noun_form(1), "coin")
    self.assertEqual(noun_phrase.noun_form(0), "coins")


if __name__ == "__main__":
  absltest.main()
