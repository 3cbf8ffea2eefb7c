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

"""Test for `numscribe.language.morphology.numbers`."""

import random

from absl import logging
from absl.testing import absltest
from absl.testing import parameterized
from numscribe.language import errors
from numscribe.language.morphology import grammar
from numscribe.language.morphology import numbers
from numscribe.language.morphology import scales
from numscribe.language.morphology import test_utils

Gender = grammar.Gender
GrammaticalContext = grammar.GrammaticalContext

_NUM_RANDOM_VALUES = 500


class NumbersTest(parameterized.TestCase):

  def setUp(self):
    super().setUp()
    self.table = test_utils.synthetic_table()
    self.numbers = numbers.Numbers(self.table)

  @parameterized.parameters(
      (0, "Z"),
      (21, "TW U1"),
      (1000, "THOU"),
      (2000, "U2 THOU"),
      (1005, "THOU U5"),
      (1234, "THOU U2 HUND X3 U4"),
      (20_015, "TW THOU T15"),
      (1_000_000, "U1 MILL"),
      (2_000_000, "U2 MILLS"),
      (1_001_000, "U1 MILL THOU"),
      (999_999_999, "U9 HUND X9 U9 MILLS U9 HUND X9 U9 THOU U9 HUND X9 U9"),
  )
  def test_verbalize(self, number, expected):
    self.assertEqual(self.numbers.verbalize(number), expected)

  def test_zero(self):
    feminine = GrammaticalContext.standalone(Gender.FEMININE)
    self.assertEqual(self.numbers.verbalize(0, context=feminine), "Z")
    self.assertEqual(numbers.render_integer(0, self.table), "Z")

  @parameterized.parameters(
      (1005, "THOU and U5"),
      (1099, "THOU and X9 U9"),
      (1100, "THOU U1 HUND"),
      (1101, "THOU U1 HUND and U1"),
      (2_000_005, "U2 MILLS and U5"),
      (2_001_005, "U2 MILLS THOU and U5"),
      (5, "U5"),
  )
  def test_include_and(self, number, expected):
    self.assertEqual(
        self.numbers.verbalize(number, include_and=True), expected
    )

  def test_and_threshold(self):
    table = test_utils.synthetic_table(and_threshold=10)
    numbers_lib = numbers.Numbers(table)
    self.assertEqual(
        numbers_lib.verbalize(1005, include_and=True), "THOU and U5"
    )
    self.assertEqual(
        numbers_lib.verbalize(1015, include_and=True), "THOU T15"
    )

  def test_and_by_default(self):
    table = test_utils.synthetic_table(and_by_default=True)
    numbers_lib = numbers.Numbers(table)
    self.assertEqual(numbers_lib.verbalize(1005), "THOU and U5")
    self.assertEqual(numbers_lib.verbalize(1005, include_and=False), "THOU U5")

  def test_scale_agreement(self):
    table = test_utils.synthetic_table(
        unit_forms={"feminine": {"1": "U1F", "2": "U2F"}},
        scales={
            "1": {"forms": {"one": "THOU", "few": "THOUS", "many": "THOUM"},
                  "gender": "feminine"},
            "2": {"forms": {"one": "MILL", "few": "MILLA", "many": "MILLS"},
                  "gender": "masculine"},
        },
        plural_rule="east_slavic",
    )
    numbers_lib = numbers.Numbers(table)
    self.assertEqual(numbers_lib.verbalize(1000), "U1F THOU")
    self.assertEqual(numbers_lib.verbalize(2000), "U2F THOUS")
    self.assertEqual(numbers_lib.verbalize(5000), "U5 THOUM")
    self.assertEqual(numbers_lib.verbalize(21_000), "TW U1F THOU")
    self.assertEqual(numbers_lib.verbalize(2_000_000), "U2 MILLA")
    # The outer context only applies to the lowest group.
    feminine = GrammaticalContext.standalone(Gender.FEMININE)
    self.assertEqual(
        numbers_lib.verbalize(2_002_002, context=feminine),
        "U2 MILLA U2F THOUS U2F",
    )
    self.assertEqual(
        numbers_lib.verbalize(2_002_002), "U2 MILLA U2F THOUS U2"
    )

  def test_scale_attach_and_joiner(self):
    table = test_utils.synthetic_table(scales={
        "1": {"forms": {"other": "THOU"}, "attach": "", "joiner": ""},
        "2": {"forms": {"other": "MILL"}},
    })
    numbers_lib = numbers.Numbers(table)
    self.assertEqual(numbers_lib.verbalize(2001), "U2THOUU1")
    self.assertEqual(numbers_lib.verbalize(1_002_000), "U1 MILL U2THOU")

  def test_elision_consistency(self):
    for magnitude, scale in self.table.scales.items():
      value = self.table.schema.magnitude_value(magnitude)
      text = self.numbers.verbalize(value)
      if scale.elide_one:
        self.assertFalse(text.startswith(self.table.units[1]), text)
        self.assertEqual(text, scale.form(grammar.PluralCategory.ONE))
      else:
        self.assertTrue(text.startswith(self.table.units[1]), text)

  def test_determinism(self):
    for number in (0, 7, 1005, 123_456_789):
      outputs = {self.numbers.verbalize(number) for _ in range(5)}
      self.assertLen(outputs, 1)

  def test_totality(self):
    max_value = self.numbers.max_value
    self.assertEqual(max_value, 1_000_000_000)
    values = list(range(2100)) + [max_value - 1]
    values.extend(
        random.randrange(max_value) for _ in range(_NUM_RANDOM_VALUES)
    )
    for value in values:
      text = self.numbers.verbalize(value)
      self.assertNotEmpty(text)
      self.assertEqual(text, text.strip())
      self.assertNotIn("  ", text)
    logging.info("Verbalized %d numbers", len(values))

  def test_overflow(self):
    with self.assertRaises(errors.ScaleOverflowError):
      self.numbers.verbalize(self.numbers.max_value)

  def test_negative(self):
    with self.assertRaises(errors.DomainError):
      self.numbers.verbalize(-1)

  def test_vigesimal(self):
    numbers_lib = numbers.Numbers(test_utils.vigesimal_table())
    self.assertEqual(numbers_lib.verbalize(20), "SCORE")
    self.assertEqual(numbers_lib.verbalize(45), "U2 SCORE U5")
    self.assertEqual(numbers_lib.verbalize(39), "SCORE SCORE LESS U1")
    self.assertEqual(numbers_lib.verbalize(400), "U1 FOURHUNDRED")
    for value in range(1, numbers_lib.max_value):
      self.assertNotEmpty(numbers_lib.verbalize(value))
    with self.assertRaises(errors.ScaleOverflowError):
      numbers_lib.verbalize(numbers_lib.max_value)

  def test_render_integer_with_schema(self):
    table = test_utils.synthetic_table(
        scales={
            "1": {"forms": {"other": "THOU"}},
            "2": {"forms": {"other": "LAKH"}},
            "3": {"forms": {"other": "CRORE"}},
        }
    )
    lakh = scales.GroupingSchema((1000, 100))
    self.assertEqual(
        numbers.render_integer(12_345_678, table, schema=lakh),
        "U1 CRORE TW U3 LAKH X4 U5 THOU U6 HUND X7 U8",
    )

  def test_compose_skips_empty_groups(self):
    groups = scales.decompose(3_000_000, self.table.schema)
    self.assertEqual(numbers.compose(groups, self.table), "U3 MILLS")
    groups = [scales.ScaleGroup(0, 0, 1000)]
    self.assertEqual(numbers.compose(groups, self.table), "")

  def test_rewrite_rules(self):
    table = test_utils.synthetic_table(
        rewrite_rules=[{"tau": [["TW U", "TWU"]]}]
    )
    numbers_lib = numbers.Numbers(table)
    self.assertEqual(numbers_lib.verbalize(21), "TWU1")
    self.assertEqual(numbers.render_integer(21, table), "TW U1")


if __name__ == "__main__":
  absltest.main()
