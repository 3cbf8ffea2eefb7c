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

"""Registry of the rule tables shipped with the package."""

import functools
import os

from numscribe.language.morphology import rule_table as rule_table_lib
from numscribe.utils import file_utils

LANGUAGES_DIR = f"{file_utils.SRC_DIR}/data/languages"

_EXTENSION = ".json"


@functools.lru_cache(maxsize=None)
def supported_languages() -> tuple[str, ...]:
  """Returns the codes of all the languages with a rule table."""
  return tuple(
      os.path.basename(path)[:-len(_EXTENSION)]
      for path in file_utils.list_files(LANGUAGES_DIR, _EXTENSION)
  )


@functools.lru_cache(maxsize=None)
def load_rule_table(code: str) -> rule_table_lib.RuleTable:
  """Loads the rule table for the language code.

  Tables are loaded once and shared.

  Args:
    code: Language code such as `en`.

  Returns:
    Rule table.

  Raises:
    ValueError: if there is no table for the language or it is malformed.
  """
  if code not in supported_languages():
    raise ValueError(
        f"Unsupported language `{code}`. Supported: {supported_languages()}"
    )
  path = file_utils.resource_path(f"{LANGUAGES_DIR}/{code}{_EXTENSION}")
  return rule_table_lib.load_rule_table(path)
