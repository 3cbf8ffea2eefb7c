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

"""Table-driven number-name grammar.

A non-negative integer is split into groups by the grouping schema of the
language, each nonzero group is rendered in the context of the scale word
that follows it, and the groups are joined most significant first.

Limitations:

1) Only cardinal numbers in the nominative are modelled. Case government
(e.g. the Russian genitive after "пять") is limited to the plural forms of
the following noun.

2) Numerals only agree with the word immediately following them.
"""

from absl import logging
from numscribe.language import errors
from numscribe.language.morphology import agreement
from numscribe.language.morphology import chunks
from numscribe.language.morphology import grammar
from numscribe.language.morphology import rewrite
from numscribe.language.morphology import rule_table as rule_table_lib
from numscribe.language.morphology import scales

GrammaticalContext = grammar.GrammaticalContext
RuleTable = rule_table_lib.RuleTable


def _takes_and(
    group: scales.ScaleGroup, table: RuleTable, include_and: bool
) -> bool:
  """Whether the conjunction precedes the lowest group."""
  if not include_and or not table.and_word or group.magnitude != 0:
    return False
  if group.value >= 100:
    return False
  return table.and_threshold is None or group.value < table.and_threshold


def compose(
    groups: list[scales.ScaleGroup],
    table: RuleTable,
    context: GrammaticalContext | None = None,
    include_and: bool = False,
) -> str:
  """Joins the groups with their scale words.

  Args:
    groups: Groups ordered from the least to the most significant.
    table: Rule table.
    context: Context of the lowest group. Higher groups are always rendered
      before their scale word.
    include_and: Whether to use the conjunction of the table.

  Returns:
    Number name, empty if all the groups are zero.
  """
  if context is None:
    context = GrammaticalContext.standalone()

  parts = []
  joiners = []
  for group in reversed(groups):
    if group.value == 0:
      continue
    if group.magnitude == 0:
      rendered = chunks.render_group(
          group.value, context, table, group.size, include_and
      )
      text = rendered.text
      joiner = ""
    else:
      scale = table.scales[group.magnitude]
      scale_form = scale.form(agreement.select_plural(group.value, table))
      if group.value == 1 and scale.elide_one:
        text = scale_form
      else:
        body = chunks.render_group(
            group.value,
            GrammaticalContext.before(
                scale.word_class, grammar.Position.PRE_SCALE
            ),
            table,
            group.size,
            include_and,
        )
        text = f"{body.text}{scale.attach}{scale_form}"
      joiner = table.group_joiner if scale.joiner is None else scale.joiner

    if parts:
      if _takes_and(group, table, include_and):
        joiners[-1] = f" {table.and_word} "
      parts.append(joiners[-1])
    parts.append(text)
    joiners.append(joiner)
  return "".join(parts)


def render_integer(
    n: int,
    table: RuleTable,
    context: GrammaticalContext | None = None,
    include_and: bool = False,
    schema: scales.GroupingSchema | None = None,
) -> str:
  """Renders a non-negative integer without applying the spelling rules.

  Args:
    n: Non-negative integer.
    table: Rule table.
    context: Context of the whole number.
    include_and: Whether to use the conjunction of the table.
    schema: Grouping schema, defaults to the one of the table.

  Returns:
    Number name.

  Raises:
    DomainError: for negative numbers.
    ScaleOverflowError: if the number is too large for the table.
  """
  if n < 0:
    raise errors.DomainError(f"Cannot render negative integer {n}")
  if n == 0:
    return table.zero
  groups = scales.decompose(
      n, schema or table.schema, scale_classes=table.scale_classes
  )
  return compose(groups, table, context, include_and)


class Numbers:
  """Definition of number names for one language.

  The rule table supplies the vocabulary. Its rewrite rules are compiled once
  and applied to every rendered integer.
  """

  def __init__(self, table: RuleTable) -> None:
    self._table = table
    self._rules = rewrite.compile_rules(table.rewrite_rules)
    logging.info(
        "[%s] Compiled number grammar with %d rewrite rules",
        table.code, len(table.rewrite_rules),
    )

  def verbalize(
      self,
      number: int,
      context: GrammaticalContext | None = None,
      include_and: bool | None = None,
  ) -> str:
    if include_and is None:
      include_and = self._table.and_by_default
    number_name = render_integer(
        int(number), self._table, context, include_and
    )
    return rewrite.apply(number_name, self._rules)

  @property
  def table(self) -> RuleTable:
    return self._table

  @property
  def max_value(self) -> int:
    """Smallest number that cannot be verbalized."""
    return self._table.max_value
