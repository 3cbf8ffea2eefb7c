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

"""Splitting integers into scale groups.

The grouping schema is a list of group sizes applied from the least
significant end of the number, with the last size repeating. The usual
thousands grouping is `(1000,)`, Indian lakh/crore grouping is `(1000, 100)`
and vigesimal grouping is `(20,)`.
"""

import dataclasses
from typing import Mapping

from numscribe.language import errors
from numscribe.language.morphology import grammar


@dataclasses.dataclass(frozen=True)
class GroupingSchema:
  """Sizes of consecutive groups, least significant first."""

  sizes: tuple[int, ...] = (1000,)

  def __post_init__(self):
    if not self.sizes or any(size < 2 for size in self.sizes):
      raise ValueError(f"Invalid group sizes: {self.sizes}")

  @property
  def base(self) -> int:
    """Size of the lowest group."""
    return self.sizes[0]

  @property
  def vigesimal(self) -> bool:
    return self.base == 20

  def size(self, magnitude: int) -> int:
    return self.sizes[min(magnitude, len(self.sizes) - 1)]

  def magnitude_value(self, magnitude: int) -> int:
    """Returns the numeric value of one unit at the given magnitude."""
    value = 1
    for m in range(magnitude):
      value *= self.size(m)
    return value

  def max_value(self, max_magnitude: int) -> int:
    """Returns the smallest value that needs more than `max_magnitude`."""
    return self.magnitude_value(max_magnitude + 1)


@dataclasses.dataclass(frozen=True)
class ScaleGroup:
  """One group of digits and the magnitude of its scale word."""

  magnitude: int
  value: int
  size: int
  word_class: grammar.WordClass | None = None


def decompose(
    value: int,
    schema: GroupingSchema,
    scale_classes: Mapping[int, grammar.WordClass] | None = None,
) -> list[ScaleGroup]:
  """Splits a non-negative integer into groups.

  Args:
    value: Non-negative integer.
    schema: Grouping schema.
    scale_classes: If given, maps magnitudes (starting from 1) to the classes
      of their scale words. Magnitudes missing from the mapping cannot be
      verbalized and needing one raises `ScaleOverflowError`.

  Returns:
    Groups ordered from the least to the most significant one. Zero yields a
    single empty group at magnitude 0.

  Raises:
    DomainError: if the value is negative.
    ScaleOverflowError: if the value needs an undefined scale word.
  """
  if value < 0:
    raise errors.DomainError(f"Cannot decompose negative value {value}")
  max_magnitude = None
  if scale_classes is not None:
    max_magnitude = max(scale_classes, default=0)

  groups = []
  remaining = value
  magnitude = 0
  while True:
    size = schema.size(magnitude)
    remaining, group_value = divmod(remaining, size)
    if max_magnitude is not None and magnitude > max_magnitude:
      raise errors.ScaleOverflowError(value, max_magnitude)
    word_class = None
    if scale_classes is not None and magnitude > 0:
      word_class = scale_classes[magnitude]
    groups.append(ScaleGroup(magnitude, group_value, size, word_class))
    if remaining == 0:
      break
    magnitude += 1
  return groups
