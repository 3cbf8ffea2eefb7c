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

"""Amounts of money."""

import decimal

from absl import logging
from numscribe.language import errors
from numscribe.language.morphology import numbers as numbers_lib
from numscribe.language.syntax import phrase
from numscribe.texts import options as options_lib


def split_amount(
    value: decimal.Decimal, subunits: int, round_half_up: bool
) -> tuple[int, int]:
  """Splits a non-negative amount into main units and subunits.

  Args:
    value: Non-negative amount.
    subunits: Number of subunits in the main unit.
    round_half_up: Round to the closest subunit, halves going up. Otherwise
      the fraction of the subunit is dropped.

  Returns:
    Main units and subunits.
  """
  rounding = decimal.ROUND_HALF_UP if round_half_up else decimal.ROUND_DOWN
  # The product needs at most as many digits as both factors together.
  precision = len(value.as_tuple().digits) + len(str(subunits))
  with decimal.localcontext() as context:
    context.prec = max(context.prec, precision)
    total = (value * subunits).to_integral_value(rounding=rounding)
  main, sub = divmod(int(total), subunits)
  return main, sub


def verbalize_currency(
    value: decimal.Decimal,
    numbers: numbers_lib.Numbers,
    options: options_lib.Options,
) -> str:
  """Verbalizes a non-negative amount of money.

  Args:
    value: Non-negative amount in main units.
    numbers: Number grammar of the language.
    options: Verbalization options.

  Returns:
    Amount in words, e.g. "one dollar and fifty cents".

  Raises:
    DomainError: for negative values.
    ValueError: if the language does not know the currency.
  """
  if value < 0:
    raise errors.DomainError(f"Expected non-negative amount, got {value}")
  table = numbers.table
  info = table.currency(options.currency_code)
  main, sub = split_amount(value, info.subunits, options.round_currency)
  logging.debug("[%s] %s -> %d/%d subunits", table.code, value, sub,
                info.subunits)

  main_phrase = phrase.CountedNoun(numbers, info.main)
  if sub and info.sub is None:
    logging.warning(
        "[%s] Currency has no subunit name, dropping %d subunits",
        table.code, sub,
    )
    sub = 0
  if not sub:
    return main_phrase.verbalize(main, include_and=options.include_and)

  sub_text = phrase.CountedNoun(numbers, info.sub).verbalize(
      sub, include_and=options.include_and
  )
  if not main:
    return sub_text
  main_text = main_phrase.verbalize(main, include_and=options.include_and)
  separator = table.and_word if info.separator is None else info.separator
  if not separator:
    return f"{main_text} {sub_text}"
  return f"{main_text} {separator} {sub_text}"
