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

"""Miscellaneous file-related utilities."""

import glob
import os

from absl import logging

# Source directory for all the code and data.
SRC_DIR = "numscribe"

# Directory containing `SRC_DIR`, both in the source tree and when installed.
_ROOT_DIR = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)


def resource_path(path: str) -> str:
  """Returns fully qualified path for the given resource.

  Args:
    path: Path to resource relative to the directory containing `SRC_DIR`,
      e.g. `numscribe/data/languages/en.json`.

  Returns:
    Full path.
  """
  return os.path.join(_ROOT_DIR, path)


def list_files(resource_dir: str, extension: str) -> list[str]:
  """Lists the resource files with the given extension.

  Resource directory must exist.

  Args:
    resource_dir: Resource directory, relative as in `resource_path`.
    extension: File extension including the dot, e.g. `.json`.

  Returns:
    Sorted list of fully qualified paths (may be empty).
  """
  full_dir = resource_path(resource_dir)
  if not os.path.isdir(full_dir):
    raise ValueError(f"Resource directory {full_dir} does not exist!")

  logging.debug("Searching for `%s` files in `%s` ...", extension, full_dir)
  return sorted(glob.glob(os.path.join(full_dir, f"*{extension}")))
