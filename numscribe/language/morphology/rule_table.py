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

"""Per-language rule tables for number names.

A rule table is the complete description of how a language names numbers:
the base vocabulary, variant forms used for agreement, scale words and their
plural forms, irregular compounds, joiners, and the vocabulary for currency,
decimals and years. Tables are immutable and are normally loaded from the JSON
files under `numscribe/data/languages`. The keys of the JSON objects mirror
the field names below.

Example (abridged):

  {
    "code": "en",
    "zero": "zero",
    "units": ["zero", "one", ..., "nine"],
    "teens": ["ten", "eleven", ..., "nineteen"],
    "tens": ["", "ten", "twenty", ..., "ninety"],
    "hundred_word": "hundred",
    "tens_joiner": "-",
    "scales": {"1": {"forms": {"other": "thousand"}}, ...},
    "plural_rule": "one_other",
    "currencies": {"USD": {"main": {"forms": {...}}, ...}}
  }
"""

import dataclasses
import json
from typing import Any

from absl import logging
from numscribe.language.morphology import grammar
from numscribe.language.morphology import scales as scales_lib

PluralCategory = grammar.PluralCategory
FormKey = grammar.FormKey
Slot = grammar.Slot

_YEAR_HUNDRED_POLICIES = ("small", "always", "exact")


@dataclasses.dataclass(frozen=True)
class ScaleWord:
  """Scale word for one magnitude (thousand, million, lakh, ...).

  Attributes:
    forms: Word forms keyed by the plural category of the group value.
    word_class: Grammatical class of the word, numerals before it agree
      with it.
    elide_one: If true, a group value of one is not spoken ("thousand"
      rather than "one thousand").
    attach: Text between the group and the scale word.
    joiner: Text between this group and the next lower group. Defaults to the
      group joiner of the table.
  """

  forms: dict[PluralCategory, str]
  word_class: grammar.WordClass = grammar.WordClass()
  elide_one: bool = False
  attach: str = " "
  joiner: str | None = None

  def form(self, category: PluralCategory) -> str:
    return grammar.pick_form(self.forms, category)


@dataclasses.dataclass(frozen=True)
class UnitName:
  """A counted noun such as a currency unit."""

  forms: dict[PluralCategory, str]
  word_class: grammar.WordClass = grammar.WordClass()

  def form(self, category: PluralCategory) -> str:
    return grammar.pick_form(self.forms, category)


@dataclasses.dataclass(frozen=True)
class CurrencyInfo:
  """Names of the main unit and of the subunit of a currency."""

  main: UnitName
  sub: UnitName | None = None
  separator: str | None = None
  subunits: int = 100


@dataclasses.dataclass(frozen=True)
class YearRange:
  """Years that are read as a century followed by the remainder.

  For instance, English reads 1984 as "nineteen eighty-four" and 1905 as
  "nineteen hundred five", German reads 1984 as
  "neunzehnhundertvierundachtzig".

  Attributes:
    start: First year of the range.
    end: Last year of the range.
    hundred_word: Word put after the century, if any.
    hundred_when: Either "small", when the hundred word is only used for
      remainders below ten, "always", or "exact", when only whole centuries
      are read this way and other years are plain numbers.
    joiner: Text between the parts.
  """

  start: int
  end: int
  hundred_word: str | None = None
  hundred_when: str = "small"
  joiner: str = " "

  def __contains__(self, year: int) -> bool:
    if self.hundred_when == "exact" and year % 100:
      return False
    return self.start <= year <= self.end


@dataclasses.dataclass(frozen=True)
class RewriteRule:
  """Context-dependent spelling rule applied to rendered integers.

  Attributes:
    tau: Pairs of input and output strings.
    left: Alternative left contexts. Empty means any context.
    right: Alternative right contexts. Empty means any context.

  Input and output strings are matched literally. Context strings are
  compiled as they are, so that "[BOS]" and "[EOS]" mark the string
  boundaries. A literal "[", "]" or "\\" in a context must be escaped with a
  backslash.
  """

  tau: tuple[tuple[str, str], ...]
  left: tuple[str, ...] = ()
  right: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class RuleTable:
  """Complete number-name configuration of a language."""

  code: str
  name: str
  zero: str
  units: tuple[str, ...]
  tens: tuple[str, ...]
  teens: tuple[str, ...] | None = None
  tens_combining: tuple[str, ...] | None = None
  hundreds: tuple[str, ...] | None = None
  hundreds_combining: tuple[str, ...] | None = None
  hundred_word: str | None = None
  hundred_elide_one: bool = False
  hundred_joiner: str = " "
  tens_joiner: str = " "
  units_first: bool = False
  unit_forms: dict[FormKey, dict[int, str]] = dataclasses.field(
      default_factory=dict
  )
  hundred_forms: dict[FormKey, dict[int, str]] = dataclasses.field(
      default_factory=dict
  )
  exceptions: dict[int, str] = dataclasses.field(default_factory=dict)
  schema: scales_lib.GroupingSchema = scales_lib.GroupingSchema()
  scales: dict[int, ScaleWord] = dataclasses.field(default_factory=dict)
  plural_rule: str = "one_other"
  group_joiner: str = " "
  and_word: str = ""
  and_threshold: int | None = None
  and_by_default: bool = False
  plus_word: str = ""
  minus_word: str = ""
  subtractive_threshold: int = 0
  additive_pattern: str = "{base} {plus} {unit}"
  subtractive_pattern: str = "{base} {minus} {unit}"
  negative_word: str = "minus"
  decimal_separators: dict[str, str] = dataclasses.field(default_factory=dict)
  default_decimal_separator: str = "point"
  decimal_digits: tuple[str, ...] | None = None
  era_before: str = ""
  era_after: str = ""
  year_ranges: tuple[YearRange, ...] = ()
  currencies: dict[str, CurrencyInfo] = dataclasses.field(
      default_factory=dict
  )
  default_currency: str | None = None
  rewrite_rules: tuple[RewriteRule, ...] = ()

  @property
  def max_magnitude(self) -> int:
    return max(self.scales, default=0)

  @property
  def max_value(self) -> int:
    """Smallest value that cannot be verbalized with this table."""
    return self.schema.max_value(self.max_magnitude)

  @property
  def scale_classes(self) -> dict[int, grammar.WordClass]:
    return {m: word.word_class for m, word in self.scales.items()}

  def variants(self, slot: Slot) -> dict[FormKey, dict[int, str]]:
    """Returns the variant forms of the numeral words in a slot."""
    if slot == Slot.UNIT:
      return self.unit_forms
    if slot == Slot.TEN:
      if not self.tens_combining:
        return {}
      return {FormKey.COMBINING: _indexed(self.tens_combining)}
    variants = dict(self.hundred_forms)
    if self.hundreds_combining:
      variants[FormKey.COMBINING] = _indexed(self.hundreds_combining)
    return variants

  def base_word(self, slot: Slot, digit: int) -> str:
    if slot == Slot.UNIT:
      return self.units[digit]
    if slot == Slot.TEN:
      return self.tens[digit]
    if self.hundreds is None:
      raise ValueError(f"[{self.code}] Table has no hundreds words")
    return self.hundreds[digit]

  def currency(self, code: str | None = None) -> CurrencyInfo:
    code = code or self.default_currency
    if not code or code not in self.currencies:
      raise ValueError(f"[{self.code}] Unknown currency: {code}")
    return self.currencies[code]

  def decimal_separator_word(self, separator: str | None = None) -> str:
    separator = separator or self.default_decimal_separator
    if separator not in self.decimal_separators:
      raise ValueError(
          f"[{self.code}] No word for decimal separator {separator}"
      )
    return self.decimal_separators[separator]

  def digit_word(self, digit: int) -> str:
    """Word for a single fractional digit."""
    if self.decimal_digits is not None:
      return self.decimal_digits[digit]
    return self.zero if digit == 0 else self.units[digit]


def _indexed(words: tuple[str, ...]) -> dict[int, str]:
  return {i: word for i, word in enumerate(words) if word}


def _forms(data: dict[str, str]) -> dict[PluralCategory, str]:
  return {PluralCategory(category): word for category, word in data.items()}


def _word_class(data: dict[str, Any], name: str) -> grammar.WordClass:
  return grammar.WordClass(
      gender=grammar.Gender(data.get("gender", "none")), name=name
  )


def _variant_forms(
    data: dict[str, dict[str, str]]
) -> dict[FormKey, dict[int, str]]:
  return {
      FormKey(key): {int(value): word for value, word in words.items()}
      for key, words in data.items()
  }


def _unit_name(data: dict[str, Any]) -> UnitName:
  forms = _forms(data["forms"])
  return UnitName(
      forms=forms,
      word_class=_word_class(
          data, grammar.pick_form(forms, PluralCategory.ONE)
      ),
  )


def _tuple_or_none(data: dict[str, Any], key: str) -> tuple[str, ...] | None:
  return tuple(data[key]) if data.get(key) is not None else None


def parse_rule_table(data: dict[str, Any]) -> RuleTable:
  """Builds a rule table from its JSON-style dictionary representation.

  Args:
    data: Dictionary with the keys described in the module docstring.

  Returns:
    Validated rule table.

  Raises:
    ValueError: if the table is malformed or not total over its groups.
  """
  scale_words = {}
  for magnitude, scale in data.get("scales", {}).items():
    forms = _forms(scale["forms"])
    scale_words[int(magnitude)] = ScaleWord(
        forms=forms,
        word_class=_word_class(
            scale, grammar.pick_form(forms, PluralCategory.ONE)
        ),
        elide_one=scale.get("elide_one", False),
        attach=scale.get("attach", " "),
        joiner=scale.get("joiner"),
    )

  currencies = {}
  for code, currency in data.get("currencies", {}).items():
    currencies[code] = CurrencyInfo(
        main=_unit_name(currency["main"]),
        sub=_unit_name(currency["sub"]) if currency.get("sub") else None,
        separator=currency.get("separator"),
        subunits=currency.get("subunits", 100),
    )

  year_ranges = tuple(
      YearRange(
          start=year["start"],
          end=year["end"],
          hundred_word=year.get("hundred_word"),
          hundred_when=year.get("hundred_when", "small"),
          joiner=year.get("joiner", " "),
      )
      for year in data.get("year_ranges", [])
  )

  rewrite_rules = tuple(
      RewriteRule(
          tau=tuple((src, dst) for src, dst in rule["tau"]),
          left=tuple(rule.get("left", [])),
          right=tuple(rule.get("right", [])),
      )
      for rule in data.get("rewrite_rules", [])
  )

  table = RuleTable(
      code=data["code"],
      name=data.get("name", data["code"]),
      zero=data["zero"],
      units=tuple(data["units"]),
      tens=tuple(data["tens"]),
      teens=_tuple_or_none(data, "teens"),
      tens_combining=_tuple_or_none(data, "tens_combining"),
      hundreds=_tuple_or_none(data, "hundreds"),
      hundreds_combining=_tuple_or_none(data, "hundreds_combining"),
      hundred_word=data.get("hundred_word"),
      hundred_elide_one=data.get("hundred_elide_one", False),
      hundred_joiner=data.get("hundred_joiner", " "),
      tens_joiner=data.get("tens_joiner", " "),
      units_first=data.get("units_first", False),
      unit_forms=_variant_forms(data.get("unit_forms", {})),
      hundred_forms=_variant_forms(data.get("hundred_forms", {})),
      exceptions={
          int(value): word
          for value, word in data.get("exceptions", {}).items()
      },
      schema=scales_lib.GroupingSchema(tuple(data.get("group_sizes", [1000]))),
      scales=scale_words,
      plural_rule=data.get("plural_rule", "one_other"),
      group_joiner=data.get("group_joiner", " "),
      and_word=data.get("and_word", ""),
      and_threshold=data.get("and_threshold"),
      and_by_default=data.get("and_by_default", False),
      plus_word=data.get("plus_word", ""),
      minus_word=data.get("minus_word", ""),
      subtractive_threshold=data.get("subtractive_threshold", 0),
      additive_pattern=data.get("additive_pattern", "{base} {plus} {unit}"),
      subtractive_pattern=data.get(
          "subtractive_pattern", "{base} {minus} {unit}"
      ),
      negative_word=data.get("negative_word", "minus"),
      decimal_separators=dict(data.get("decimal_separators", {})),
      default_decimal_separator=data.get("default_decimal_separator", "point"),
      decimal_digits=_tuple_or_none(data, "decimal_digits"),
      era_before=data.get("era_before", ""),
      era_after=data.get("era_after", ""),
      year_ranges=year_ranges,
      currencies=currencies,
      default_currency=data.get("default_currency"),
      rewrite_rules=rewrite_rules,
  )
  validate(table)
  return table


def load_rule_table(path: str) -> RuleTable:
  """Loads rule table from a JSON file."""
  logging.info("Loading rule table from %s ...", path)
  with open(path, mode="rt", encoding="utf-8") as f:
    return parse_rule_table(json.load(f))


def validate(table: RuleTable) -> None:
  """Checks that the table can name every value of its groups.

  Args:
    table: Rule table.

  Raises:
    ValueError: describing the first problem found.
  """

  def fail(message: str):
    raise ValueError(f"[{table.code}] {message}")

  schema = table.schema
  if table.teens is not None and len(table.teens) != 10:
    fail("Expected 10 teens words")
  if schema.vigesimal:
    if any(size != 20 for size in schema.sizes):
      fail("Vigesimal tables must use groups of 20 throughout")
    if len(table.units) < 11:
      fail("Vigesimal tables need unit words for 0 to 10")
    if len(table.tens) < 3 or not table.tens[2]:
      fail("Vigesimal tables need a word for twenty")
  else:
    if schema.base not in (100, 1000):
      fail(f"Unsupported lowest group size {schema.base}")
    if any(size not in (100, 1000) for size in schema.sizes):
      fail(f"Unsupported group sizes {schema.sizes}")
    if len(table.units) != 10:
      fail("Expected 10 unit words")
    if len(table.tens) != 10:
      fail("Expected 10 tens words")
    if table.teens is None and not all(
        n in table.exceptions for n in range(10, 20)
    ):
      fail("Values 10 to 19 need teens words or exceptions")
    for tens_digit in range(2, 10):
      if not table.tens[tens_digit] and not all(
          tens_digit * 10 + u in table.exceptions for u in range(10)
      ):
        fail(f"No word for tens digit {tens_digit}")
    if schema.base == 1000:
      if table.hundreds is None and table.hundred_word is None:
        fail("Expected hundreds words or a hundred word")
      if table.hundreds is not None and len(table.hundreds) != 10:
        fail("Expected 10 hundreds words")
  for name in ("tens_combining", "hundreds_combining"):
    words = getattr(table, name)
    if words is not None and len(words) != 10:
      fail(f"Expected 10 words in {name}")
  if table.decimal_digits is not None and len(table.decimal_digits) != 10:
    fail("Expected 10 decimal digit words")

  magnitudes = sorted(table.scales)
  if magnitudes != list(range(1, len(magnitudes) + 1)):
    fail(f"Scale magnitudes must be contiguous from 1, got {magnitudes}")
  if table.plural_rule not in grammar.PLURAL_RULES:
    fail(f"Unknown plural rule {table.plural_rule}")
  if table.default_currency and table.default_currency not in table.currencies:
    fail(f"Unknown default currency {table.default_currency}")
  for year_range in table.year_ranges:
    if year_range.hundred_when not in _YEAR_HUNDRED_POLICIES:
      fail(f"Unknown year hundred policy {year_range.hundred_when}")
    if year_range.start < 100 or year_range.start > year_range.end:
      fail(f"Invalid year range {year_range.start}-{year_range.end}")
  if table.default_decimal_separator not in table.decimal_separators:
    fail(
        f"No word for default separator {table.default_decimal_separator}"
    )
