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

"""Orthographic rewrite rules applied to rendered number names.

Some spelling changes happen at the boundary between two numeral words and are
easiest to state as context-dependent rewrites over the final string, e.g. the
Italian vowel elision in "venti" + "uno" -> "ventuno". Rules are compiled into
a single transducer once per language.
"""

from collections.abc import Sequence

from numscribe.language.morphology import rule_table as rule_table_lib

import pynini
from pynini.lib import byte
from pynini.lib import rewrite

Fst = pynini.Fst

SIGSTAR = pynini.closure(byte.BYTE).optimize()


def _context(alternatives: Sequence[str]) -> Fst | str:
  if not alternatives:
    return ""
  return pynini.union(*alternatives).optimize()


def compile_rule(rule: rule_table_lib.RewriteRule) -> Fst:
  """Compiles a single rule into an obligatory context-dependent rewrite."""
  tau = pynini.union(
      *[pynini.cross(pynini.escape(src), pynini.escape(dst))
        for src, dst in rule.tau]
  )
  return pynini.cdrewrite(
      tau, _context(rule.left), _context(rule.right), SIGSTAR
  )


def compile_rules(rules: Sequence[rule_table_lib.RewriteRule]) -> Fst | None:
  """Composes all the rules, applied in order. Returns None for no rules."""
  if not rules:
    return None
  cascade = compile_rule(rules[0])
  for rule in rules[1:]:
    cascade @= compile_rule(rule)
  return cascade.optimize()


def apply(text: str, rules: Fst | None) -> str:
  """Applies compiled rules to the text."""
  if rules is None or not text:
    return text
  return rewrite.top_rewrite(pynini.escape(text), rules)
