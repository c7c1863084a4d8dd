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
render.py - Console rendering of annotated lines
Turns RenderedOutput values into ANSI SGR escape sequences
"""

from typing import Iterable, TextIO

from .annotator import RenderedOutput

ESC = "\x1b"
RESET = f"{ESC}[0m"
CLEAR_SCREEN = f"{ESC}[2J{ESC}[1;1H"

BANNER = r"""
    ░▒▓███████▓▒░░▒▓████████▓▒░▒▓█▓▒░      ░▒▓███████▓▒░
    ░▒▓█▓▒░░▒▓█▓▒░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░░▒▓█▓▒░
    ░▒▓███████▓▒░░▒▓██████▓▒░ ░▒▓█▓▒░      ░▒▓███████▓▒░
    ░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░      ░▒▓█▓▒░
    ░▒▓█▓▒░      ░▒▓████████▓▒░▒▓████████▓▒░▒▓█▓▒░
"""


def render(output: RenderedOutput) -> str:
    """Render one output as a terminal line (without the trailing newline)"""
    if output.style is None:
        return output.text
    return f"{ESC}[{output.style}m{output.text}{RESET}"


def write_outputs(outputs: Iterable[RenderedOutput], stream: TextIO) -> int:
    """Write each output on its own line, flushing as we go. Returns the number of lines written."""
    count = 0
    for output in outputs:
        stream.write(render(output) + "\n")
        stream.flush()
        count += 1
    return count


def clear_screen(stream: TextIO) -> None:
    stream.write(CLEAR_SCREEN)
    stream.flush()
