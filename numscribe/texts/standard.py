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

"""Plain numbers with an optional fractional part."""

import decimal

from numscribe.language import errors
from numscribe.language.morphology import numbers as numbers_lib
from numscribe.texts import options as options_lib


def fractional_digits(value: decimal.Decimal, trim_zeros: bool = True) -> str:
  """Returns the digits after the decimal point, possibly without trailing
  zeros. Values without a fractional part give an empty string."""
  _, _, digits = format(value, "f").partition(".")
  if not digits.strip("0"):
    return ""
  return digits.rstrip("0") if trim_zeros else digits


def verbalize_standard(
    value: decimal.Decimal,
    numbers: numbers_lib.Numbers,
    options: options_lib.Options,
) -> str:
  """Verbalizes a non-negative number, reading fractional digits one by one.

  Trailing fractional zeros are not read.

  Args:
    value: Non-negative value.
    numbers: Number grammar of the language.
    options: Verbalization options.

  Returns:
    Words for the value.

  Raises:
    DomainError: for negative values.
  """
  if value < 0:
    raise errors.DomainError(f"Expected non-negative value, got {value}")
  table = numbers.table
  text = numbers.verbalize(
      int(value), context=options.context, include_and=options.include_and
  )
  digits = fractional_digits(value)
  if not digits:
    return text

  separator = None
  if options.decimal_separator is not None:
    separator = options.decimal_separator.value
  words = [text, table.decimal_separator_word(separator)]
  words.extend(table.digit_word(int(digit)) for digit in digits)
  return " ".join(words)
