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

"""Rendering of a single group of digits.

A group is the part of a number below the size of the lowest scale (0..999
for the usual thousands grouping, 0..19 for vigesimal tables). Groups are
rendered from the table in priority order: literal exceptions, then the base
vocabulary, then composition.
"""

import dataclasses

from absl import logging
from numscribe.language import errors
from numscribe.language.morphology import agreement
from numscribe.language.morphology import grammar
from numscribe.language.morphology import rule_table as rule_table_lib

GrammaticalContext = grammar.GrammaticalContext
RuleTable = rule_table_lib.RuleTable
Slot = grammar.Slot


@dataclasses.dataclass(frozen=True)
class RenderedGroup:
  """Words of a group along with its value."""

  text: str
  value: int

  @property
  def has_hundreds(self) -> bool:
    return self.value >= 100


def render_group(
    n: int,
    context: GrammaticalContext,
    table: RuleTable,
    size: int | None = None,
    include_and: bool = False,
) -> RenderedGroup:
  """Renders a group value into words.

  Args:
    n: Group value.
    context: Context of the group. The last numeral word agrees with it.
    table: Rule table.
    size: Size of the group, defaults to the lowest group size of the table.
    include_and: Whether to put the table's conjunction between the hundreds
      and the rest of the group.

  Returns:
    Rendered group, with empty text for zero.

  Raises:
    DomainError: if the value is outside the group.
  """
  if size is None:
    size = table.schema.base
  if not 0 <= n < size:
    raise errors.DomainError(f"Group value {n} outside of [0, {size})")
  if n == 0:
    return RenderedGroup("", 0)
  if n in table.exceptions:
    return RenderedGroup(table.exceptions[n], n)
  if table.schema.vigesimal:
    return RenderedGroup(_render_vigesimal(n, context, table), n)

  hundreds, rest = divmod(n, 100)
  if not hundreds:
    return RenderedGroup(_render_below_hundred(rest, context, table), n)
  text = _render_hundreds(hundreds, rest, context, table)
  if rest:
    joiner = table.hundred_joiner
    if include_and and table.and_word:
      joiner = f" {table.and_word} "
    text = joiner.join([text, _render_below_hundred(rest, context, table)])
  return RenderedGroup(text, n)


def _render_hundreds(
    hundreds: int, rest: int, context: GrammaticalContext, table: RuleTable
) -> str:
  """Renders the hundreds part of the group."""
  final = rest == 0
  if table.hundreds is not None:
    return agreement.word_for(hundreds, Slot.HUNDRED, context, table, final)
  if hundreds == 1 and table.hundred_elide_one:
    return table.hundred_word
  # The digit is always followed by the hundred word.
  digit = agreement.word_for(hundreds, Slot.UNIT, context, table, final=False)
  return f"{digit}{table.hundred_joiner}{table.hundred_word}"


def _render_below_hundred(
    n: int, context: GrammaticalContext, table: RuleTable
) -> str:
  """Renders values in [1, 100)."""
  if n in table.exceptions:
    return table.exceptions[n]
  if n < 10:
    return agreement.word_for(n, Slot.UNIT, context, table)
  if n < 20:
    return table.teens[n - 10]
  tens, units = divmod(n, 10)
  if not units:
    return agreement.word_for(tens, Slot.TEN, context, table)
  if table.units_first:
    first = agreement.word_for(units, Slot.UNIT, context, table, final=False)
    last = agreement.word_for(tens, Slot.TEN, context, table)
  else:
    first = agreement.word_for(tens, Slot.TEN, context, table, final=False)
    last = agreement.word_for(units, Slot.UNIT, context, table)
  return f"{first}{table.tens_joiner}{last}"


def _render_vigesimal(
    n: int, context: GrammaticalContext, table: RuleTable
) -> str:
  """Renders values in [1, 20) of a vigesimal table.

  Values up to ten are base words. Values close enough below twenty are
  expressed subtractively from twenty, the rest additively on top of ten.

  Args:
    n: Value in [1, 20).
    context: Context of the group.
    table: Rule table.

  Returns:
    Words for the value.
  """
  if n <= 10:
    return agreement.word_for(n, Slot.UNIT, context, table)
  if table.teens is not None and table.teens[n - 10]:
    return table.teens[n - 10]
  difference = 20 - n
  if difference <= table.subtractive_threshold:
    logging.debug("[%s] Subtractive form for %d", table.code, n)
    return table.subtractive_pattern.format(
        base=table.tens[2],
        minus=table.minus_word,
        unit=agreement.word_for(difference, Slot.UNIT, context, table),
    )
  return table.additive_pattern.format(
      base=table.tens[1] or table.units[10],
      plus=table.plus_word,
      unit=agreement.word_for(n - 10, Slot.UNIT, context, table),
  )
