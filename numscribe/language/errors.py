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

"""Errors raised while verbalizing numbers.

`InvalidInputError` and `ScaleOverflowError` describe user input that cannot
be verbalized and may be mapped to a fallback string by the caller.
`DomainError` is an internal contract violation and should never be hidden.
"""


class NumscribeError(Exception):
  """Base class for all verbalization errors."""


class InvalidInputError(NumscribeError):
  """Input is not a finite number."""


class ScaleOverflowError(NumscribeError):
  """Number is too large for the scale words of the rule table."""

  def __init__(self, value: int, max_magnitude: int) -> None:
    super().__init__(
        f"Number of {value.bit_length()} bits needs a scale word above "
        f"magnitude {max_magnitude}"
    )
    self.value = value
    self.max_magnitude = max_magnitude


class DomainError(NumscribeError):
  """A value outside of the range a component is defined on."""
