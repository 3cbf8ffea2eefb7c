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

"""Grammatical categories that number words agree with.

A numeral may need to agree in gender with the word that follows it (a scale
word such as "thousand" or a counted noun such as "ruble"), and the word that
follows it may in turn need to take a form that depends on the count (the
plural category). This module defines both halves.
"""

import dataclasses
import enum
from typing import Callable


class Gender(enum.Enum):
  NONE = "none"
  MASCULINE = "masculine"
  FEMININE = "feminine"
  NEUTER = "neuter"


class Position(enum.Enum):
  """Syntactic position of a numeral."""

  STANDALONE = "standalone"
  MODIFIER = "modifier"
  PRE_SCALE = "pre_scale"


class FormKey(enum.Enum):
  """Selector for a lexical variant of a numeral word."""

  DEFAULT = "default"
  MASCULINE = "masculine"
  FEMININE = "feminine"
  NEUTER = "neuter"
  # Used when another numeral word of the same chunk follows.
  COMBINING = "combining"
  # Used when the word ends the chunk but a scale word or a noun follows.
  ATTRIBUTIVE = "attributive"


class Slot(enum.Enum):
  """Which numeral word of a chunk is being rendered."""

  UNIT = "unit"
  TEN = "ten"
  HUNDRED = "hundred"


class PluralCategory(enum.Enum):
  ONE = "one"
  FEW = "few"
  MANY = "many"
  OTHER = "other"


GENDER_FORM_KEYS = {
    Gender.MASCULINE: FormKey.MASCULINE,
    Gender.FEMININE: FormKey.FEMININE,
    Gender.NEUTER: FormKey.NEUTER,
}


@dataclasses.dataclass(frozen=True)
class WordClass:
  """Grammatical class of a word that can follow a numeral."""

  gender: Gender = Gender.NONE
  name: str = ""


@dataclasses.dataclass(frozen=True)
class GrammaticalContext:
  """Context a numeral is rendered in.

  Attributes:
    gender: Gender of the counted entity when nothing follows the numeral.
    position: Syntactic position of the numeral.
    following: Class of the word immediately after the numeral, if any.
  """

  gender: Gender = Gender.NONE
  position: Position = Position.STANDALONE
  following: WordClass | None = None

  @property
  def agreement_gender(self) -> Gender:
    if self.following is not None:
      return self.following.gender
    return self.gender

  @classmethod
  def standalone(cls, gender: Gender = Gender.NONE) -> "GrammaticalContext":
    return cls(gender=gender)

  @classmethod
  def before(
      cls, word_class: WordClass, position: Position = Position.MODIFIER
  ) -> "GrammaticalContext":
    return cls(position=position, following=word_class)


# Plural-category rules. Slavic rules look at the trailing digit and treat the
# teens as an exception to it.


def _invariant(unused_count: int) -> PluralCategory:
  return PluralCategory.OTHER


def _one_other(count: int) -> PluralCategory:
  return PluralCategory.ONE if count == 1 else PluralCategory.OTHER


def _east_slavic(count: int) -> PluralCategory:
  last_digit = count % 10
  if 11 <= count % 100 <= 14:
    return PluralCategory.MANY
  if last_digit == 1:
    return PluralCategory.ONE
  if 2 <= last_digit <= 4:
    return PluralCategory.FEW
  return PluralCategory.MANY


def _west_slavic(count: int) -> PluralCategory:
  if count == 1:
    return PluralCategory.ONE
  if 2 <= count % 10 <= 4 and not 12 <= count % 100 <= 14:
    return PluralCategory.FEW
  return PluralCategory.MANY


PLURAL_RULES: dict[str, Callable[[int], PluralCategory]] = {
    "invariant": _invariant,
    "one_other": _one_other,
    "east_slavic": _east_slavic,
    "west_slavic": _west_slavic,
}

# Order in which missing plural forms are substituted.
_PLURAL_FALLBACKS = (
    PluralCategory.OTHER,
    PluralCategory.MANY,
    PluralCategory.ONE,
)


def plural_category(rule: str, count: int) -> PluralCategory:
  """Returns plural category of a non-negative count under the named rule."""
  if rule not in PLURAL_RULES:
    raise ValueError(f"Unknown plural rule: {rule}")
  return PLURAL_RULES[rule](count)


def pick_form(
    forms: dict[PluralCategory, str], category: PluralCategory
) -> str:
  """Picks the form for the category, falling back to the closest one."""
  if category in forms:
    return forms[category]
  for fallback in _PLURAL_FALLBACKS:
    if fallback in forms:
      return forms[fallback]
  raise ValueError("Word has no forms")
