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

"""Default verbalization configuration.

Plain cardinal numbers in English.
"""

import ml_collections


def get_config():
  """Get the default verbalization configuration."""
  config = ml_collections.ConfigDict()

  # Language code of the rule table, e.g. `en` or `ru`.
  config.lang = "en"

  # String returned for inputs that cannot be verbalized. Empty string means
  # errors are raised.
  config.fallback_on_error = ""

  options = ml_collections.ConfigDict()
  # Render amounts of money.
  options.currency = False
  # Code of the currency, empty for the default currency of the language.
  options.currency_code = ""
  # Round the subunits half-up rather than truncating them.
  options.round_currency = False

  # Either `standard` or `year`.
  options.format = "standard"
  # Append the era word to positive years.
  options.include_era_suffix = False

  # Either `point`, `comma` or empty for the language default.
  options.decimal_separator = ""
  # Word for negative numbers, empty for the language default.
  options.negative_word = ""

  # Gender of the counted entity: `none`, `masculine`, `feminine` or `neuter`.
  options.gender = "none"
  # Whether to use the conjunction inside numbers ("one hundred and one").
  # None means the language default.
  options.include_and = ml_collections.FieldReference(None, field_type=bool)

  config.options = options
  return config
