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

"""Conversion of user input to exact decimals."""

import decimal
from typing import Any

from numscribe.language import errors


def normalize(raw: Any) -> decimal.Decimal:
  """Converts the input into an exact finite decimal.

  Floats are converted through their shortest representation, so `0.1` gives
  `Decimal("0.1")` rather than its binary expansion.

  Args:
    raw: Integer, float, decimal or numeric string.

  Returns:
    Finite decimal.

  Raises:
    InvalidInputError: for unsupported types, unparseable strings, NaN and
      infinities.
  """
  if isinstance(raw, bool):
    raise errors.InvalidInputError(f"Not a number: {raw!r}")
  if isinstance(raw, int):
    value = decimal.Decimal(raw)
  elif isinstance(raw, float):
    value = decimal.Decimal(repr(raw))
  elif isinstance(raw, decimal.Decimal):
    value = raw
  elif isinstance(raw, str):
    try:
      value = decimal.Decimal(raw.strip())
    except decimal.InvalidOperation as e:
      raise errors.InvalidInputError(f"Not a number: {raw!r}") from e
  else:
    raise errors.InvalidInputError(
        f"Unsupported input type {type(raw).__name__}"
    )
  if not value.is_finite():
    raise errors.InvalidInputError(f"Not a finite number: {raw!r}")
  return value
