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

"""Pytest fixtures for running the absl tests under pytest."""

import sys

from absl import flags
from absl import logging
# Need to import absltest to get `--test_srcdir` and `--test_tmpdir` defined.
from absl.testing import absltest  # pylint: disable=unused-import
import pytest


@pytest.fixture(scope="session", autouse=True)
def parse_flags() -> None:
  """Avoids `UnparsedFlagAccessError` in tests that read flags."""
  # Only pass the program name, pytest flags are not absl flags.
  if not flags.FLAGS.is_parsed():
    flags.FLAGS(sys.argv[:1])
  logging.set_verbosity(logging.DEBUG)
