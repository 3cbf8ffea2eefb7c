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

"""Conversion of numbers to words in any of the supported languages.

Example:

  verbalizer = Verbalizer("en")
  verbalizer(1.5)  # "one point five"
  verbalizer(1.5, options.Options(currency=True))
  # "one dollar and fifty cents"
"""

import decimal
from typing import Any

from absl import logging
from numscribe.language import errors
from numscribe.language.morphology import numbers as numbers_lib
from numscribe.texts import currency
from numscribe.texts import languages
from numscribe.texts import normalize
from numscribe.texts import options as options_lib
from numscribe.texts import standard
from numscribe.texts import years

DEFAULT_LANGUAGE = "en"

# Errors caused by the input, which may be replaced by a fallback string.
_RECOVERABLE_ERRORS = (errors.InvalidInputError, errors.ScaleOverflowError)


class Verbalizer:
  """Verbalizes numbers in the current language.

  If `fallback_on_error` is given, it is returned instead of raising for
  inputs that are not numbers or are too large for the language.
  """

  def __init__(
      self,
      lang: str = DEFAULT_LANGUAGE,
      fallback_on_error: str | None = None,
  ) -> None:
    self._fallback_on_error = fallback_on_error
    self._numbers: dict[str, numbers_lib.Numbers] = {}
    self._lang = None
    self.set_lang(lang)

  @property
  def lang(self) -> str:
    return self._lang

  def set_lang(self, lang: str) -> None:
    """Switches the current language. Raises ValueError if unsupported."""
    if lang not in self._numbers:
      self._numbers[lang] = numbers_lib.Numbers(languages.load_rule_table(lang))
    if lang != self._lang:
      logging.info("Verbalizing in `%s`", lang)
    self._lang = lang

  def set_lang_safe(self, lang: str) -> bool:
    """Switches the language, falling back to the default one.

    Args:
      lang: Language code.

    Returns:
      True if the requested language is now current.
    """
    try:
      self.set_lang(lang)
      return True
    except ValueError as e:
      logging.warning(
          "Cannot switch to `%s` (%s), using `%s`", lang, e, DEFAULT_LANGUAGE
      )
      self.set_lang(DEFAULT_LANGUAGE)
      return False

  @property
  def numbers(self) -> numbers_lib.Numbers:
    """Number grammar of the current language."""
    return self._numbers[self._lang]

  def verbalize(
      self, number: Any, options: options_lib.Options | None = None
  ) -> str:
    """Verbalizes a number.

    Args:
      number: Integer, float, decimal or numeric string.
      options: Verbalization options, defaults are used if not given.

    Returns:
      Number in words, or the fallback string for bad inputs when configured.

    Raises:
      InvalidInputError: if the input is not a finite number.
      ScaleOverflowError: if the number is too large for the language.
      ValueError: if the options refer to something the language lacks.
    """
    try:
      return self._verbalize(number, options or options_lib.Options())
    except _RECOVERABLE_ERRORS as e:
      if self._fallback_on_error is None:
        raise
      logging.warning("[%s] Cannot verbalize input: %s", self._lang, e)
      return self._fallback_on_error

  __call__ = verbalize

  def _verbalize(self, number: Any, options: options_lib.Options) -> str:
    value = normalize.normalize(number)
    numbers = self.numbers
    table = numbers.table

    if options.format == options_lib.Format.YEAR:
      return years.verbalize_year(int(value), numbers, options)
    if value == 0:
      if options.currency:
        return currency.verbalize_currency(
            decimal.Decimal(0), numbers, options
        )
      return table.zero

    if options.currency:
      text = currency.verbalize_currency(value.copy_abs(), numbers, options)
    else:
      text = standard.verbalize_standard(value.copy_abs(), numbers, options)
    if value < 0:
      negative_word = options.negative_word or table.negative_word
      text = f"{negative_word} {text}"
    return text
