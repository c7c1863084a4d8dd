#!/usr/bin/env python3

# PELP - Pattern highlighter for serial and device output
# Copyright (C) 2025 Robert Macrae
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
annotator.py - Line annotation engine
Evaluates every rule of a profile against a line and yields one rendered output per rule
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from .logs import is_logging_enabled, log_message


class Scope(Enum):
    """Where in a line a rule's pattern has to appear"""

    LINE_START = "start of line"
    ANYWHERE = "anywhere"

    @classmethod
    def parse(cls, value: Optional[str]) -> 'Scope':
        """Map a raw `where` value onto a scope. Anything unrecognised means ANYWHERE."""
        if isinstance(value, Scope):
            return value
        if value in ("start of line", "sol"):
            return cls.LINE_START
        return cls.ANYWHERE


@dataclass(frozen=True)
class Rule:
    """A single color entry of a profile"""

    pattern: str = ""
    scope: Scope = Scope.ANYWHERE
    do_substitute: bool = False
    substitute_with: str = ""
    skip: bool = False
    style: str = ""

    def __post_init__(self):
        # Accept raw `where` strings as well as Scope members
        object.__setattr__(self, 'scope', Scope.parse(self.scope))

    def matches(self, line: str) -> bool:
        """Check if the pattern occurs in line according to the rule's scope"""
        if self.scope is Scope.LINE_START:
            return line.startswith(self.pattern)
        return self.pattern in line

    def substitute(self, line: str) -> str:
        """Replace every occurrence of the pattern in line"""
        return line.replace(self.pattern, self.substitute_with)


# Profiles are immutable once loaded
Profile = Tuple[Rule, ...]


@dataclass(frozen=True)
class RenderedOutput:
    """One printed line. A style of None means the text is printed verbatim."""

    text: str
    style: Optional[str] = None


def evaluate(line: str, profile: Iterable[Rule]) -> Iterator[RenderedOutput]:
    """Yield one output per non-skipped rule, in profile order.

    Every rule is evaluated independently; there is no first-match-wins.
    A matching rule yields the line with the rule's style, a non-matching
    rule yields the line unstyled. When a matching rule asks for
    substitution the substituted text is computed but the original line
    is still what gets emitted.
    """
    for rule in profile:
        if rule.skip:
            continue

        if not rule.matches(line):
            yield RenderedOutput(line)
            continue

        if rule.do_substitute:
            candidate = rule.substitute(line)
            if is_logging_enabled():
                log_message("DEBUG", f"Substitution for '{rule.pattern}' computed: '{candidate}' (not emitted)")

        yield RenderedOutput(line, rule.style)


def annotate_lines(lines: Iterable[str], profile: Profile) -> Iterator[RenderedOutput]:
    """Annotate a stream of raw lines. Lines that are empty once trailing whitespace is stripped are dropped."""
    for raw in lines:
        line = raw.rstrip()
        if not line:
            continue
        yield from evaluate(line, profile)
