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

"""Prints the words for the given numbers, one per line.

Example:

  python -m numscribe.texts.verbalize_main --lang=ru --numbers=21,1.5 \
    --config=numscribe/texts/configs/default.py \
    --config.options.currency=True
"""

from absl import app
from absl import flags
from absl import logging
from ml_collections import config_flags
from numscribe.texts import languages
from numscribe.texts import options as options_lib
from numscribe.texts import verbalizer as verbalizer_lib
from numscribe.texts.configs import default

_CONFIG = config_flags.DEFINE_config_file(
    "config", None,
    "File path to the verbalization configuration. Defaults are used if not "
    "given.",
)

_LANG = flags.DEFINE_string(
    "lang", None,
    "Language code. Overrides the language in the configuration."
)

_NUMBERS = flags.DEFINE_list(
    "numbers", [],
    "Numbers to verbalize."
)

_FALLBACK = flags.DEFINE_string(
    "fallback", None,
    "String printed for inputs that cannot be verbalized. Overrides the "
    "configuration."
)

_LIST_LANGUAGES = flags.DEFINE_bool(
    "list_languages", False,
    "Print the supported language codes and exit."
)


def main(argv):
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")

  if _LIST_LANGUAGES.value:
    for code in languages.supported_languages():
      print(code)
    return

  config = _CONFIG.value or default.get_config()
  lang = _LANG.value or config.lang
  fallback = _FALLBACK.value
  if fallback is None:
    fallback = config.fallback_on_error or None
  options = options_lib.options_from_config(config.options)
  logging.info("Options: %s", options)

  verbalizer = verbalizer_lib.Verbalizer(lang, fallback_on_error=fallback)
  for number in _NUMBERS.value:
    print(verbalizer(number, options))


def run():
  app.run(main)


if __name__ == "__main__":
  run()
