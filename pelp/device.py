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

"""Input device handling - opens a device node (or file, or stdin) and streams its lines."""

import io
import sys
from typing import Iterator, TextIO

from .errors import DeviceOpenFailed
from .logs import log_message

STDIN_DEVICE = "-"


def open_device(path: str) -> TextIO:
    r"""Open a device for line reading.

    Undecodable bytes are replaced rather than raised so that every line
    handed to the annotator is valid text. Only `\n` ends a line; a bare
    `\r` from a progress bar stays inside it. `-` reads from stdin.
    """
    if path == STDIN_DEVICE:
        return io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', errors='replace', newline='\n')

    try:
        stream = open(path, 'r', encoding='utf-8', errors='replace', newline='\n')
    except OSError as e:
        log_message("DEBUG", f"open({path}) failed: {e}")
        raise DeviceOpenFailed(f"failed to open {path}: {e.strerror or e}") from e

    log_message("INFO", f"Opened device {path}")
    return stream


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from stream as they arrive, until EOF"""
    while True:
        line = stream.readline()
        if not line:
            return
        yield line
