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

"""Calendar years.

Years are cardinal numbers followed by an era word. The era word for years
before the common era is always present, the one for years of the common era
only on request. Languages may read some ranges of years as a century followed
by the rest, e.g. "nineteen eighty-four".
"""

from numscribe.language.morphology import numbers as numbers_lib
from numscribe.language.morphology import rule_table as rule_table_lib
from numscribe.texts import options as options_lib


def _verbalize_range(
    year: int,
    year_range: rule_table_lib.YearRange,
    numbers: numbers_lib.Numbers,
    include_and: bool,
) -> str:
  """Reads the year as a century and the remainder."""
  century, rest = divmod(year, 100)
  parts = [numbers.verbalize(century)]
  use_hundred = year_range.hundred_word is not None and (
      year_range.hundred_when != "small" or rest < 10
  )
  if use_hundred:
    parts.append(year_range.hundred_word)
  if rest:
    and_word = numbers.table.and_word
    if use_hundred and include_and and and_word:
      parts.append(and_word)
    parts.append(numbers.verbalize(rest, include_and=include_and))
  return year_range.joiner.join(parts)


def verbalize_year(
    year: int,
    numbers: numbers_lib.Numbers,
    options: options_lib.Options,
) -> str:
  """Verbalizes a calendar year.

  Args:
    year: Year, negative for years before the common era.
    numbers: Number grammar of the language.
    options: Verbalization options.

  Returns:
    Year in words with the era word where needed.
  """
  table = numbers.table
  include_and = options.include_and
  if include_and is None:
    include_and = table.and_by_default

  absolute = abs(year)
  text = None
  for year_range in table.year_ranges:
    if absolute in year_range:
      text = _verbalize_range(absolute, year_range, numbers, include_and)
      break
  if text is None:
    text = numbers.verbalize(absolute, include_and=include_and)

  if year < 0 and table.era_before:
    text = f"{text} {table.era_before}"
  elif year > 0 and options.include_era_suffix and table.era_after:
    text = f"{text} {table.era_after}"
  return text
