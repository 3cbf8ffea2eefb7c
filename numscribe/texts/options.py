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

"""Options controlling how a number is verbalized."""

import dataclasses
import enum

from numscribe.language.morphology import grammar

import ml_collections


class Format(enum.Enum):
  STANDARD = "standard"
  YEAR = "year"


class DecimalSeparator(enum.Enum):
  POINT = "point"
  COMMA = "comma"


@dataclasses.dataclass(frozen=True)
class Options:
  """Verbalization options.

  Attributes:
    currency: Render the number as an amount of money.
    format: Plain number or calendar year.
    decimal_separator: Word used before the fractional digits. Defaults to the
      separator preferred by the language.
    include_era_suffix: Append the era word to positive years.
    round_currency: Round the subunits half-up rather than truncating them.
    negative_word: Overrides the word of the language for negative numbers.
    currency_code: Currency to use, defaults to the language's own.
    gender: Gender of the counted entity for bare numbers.
    include_and: Overrides whether the conjunction is used inside numbers.
  """

  currency: bool = False
  format: Format = Format.STANDARD
  decimal_separator: DecimalSeparator | None = None
  include_era_suffix: bool = False
  round_currency: bool = False
  negative_word: str | None = None
  currency_code: str | None = None
  gender: grammar.Gender = grammar.Gender.NONE
  include_and: bool | None = None

  @property
  def context(self) -> grammar.GrammaticalContext:
    return grammar.GrammaticalContext.standalone(self.gender)


def _none_if_empty(value: str | None) -> str | None:
  return value if value else None


def options_from_config(config: ml_collections.ConfigDict) -> Options:
  """Builds options from the `options` section of a configuration.

  Args:
    config: Configuration with the fields of `Options`. Enumerations are given
      by their string values, empty strings stand for unset values.

  Returns:
    Options.

  Raises:
    ValueError: if an enumeration value is unknown.
  """
  separator = _none_if_empty(config.get("decimal_separator"))
  include_and = config.get("include_and")
  return Options(
      currency=bool(config.get("currency", False)),
      format=Format(config.get("format") or Format.STANDARD.value),
      decimal_separator=DecimalSeparator(separator) if separator else None,
      include_era_suffix=bool(config.get("include_era_suffix", False)),
      round_currency=bool(config.get("round_currency", False)),
      negative_word=_none_if_empty(config.get("negative_word")),
      currency_code=_none_if_empty(config.get("currency_code")),
      gender=grammar.Gender(config.get("gender") or grammar.Gender.NONE.value),
      include_and=None if include_and is None else bool(include_and),
  )
