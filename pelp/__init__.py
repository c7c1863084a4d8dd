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

"""PELP - Line-oriented pattern highlighter for serial and device output, driven by named rule profiles."""

from .__version__ import __version__, __author__, __license__

# Annotation API
from .annotator import (
    Profile,
    RenderedOutput,
    Rule,
    Scope,
    annotate_lines,
    evaluate,
)

# Profiles API
from .profiles import (
    DEFAULT_PROFILE,
    Config,
    get_profile,
    list_profiles,
    load_config,
    parse_config,
)

from .errors import (
    ConfigMalformed,
    ConfigUnreadable,
    DeviceOpenFailed,
    PelpError,
    ProfileNotFound,
)

from .render import render

__all__ = [
    '__version__',
    '__author__',
    '__license__',
    'Profile',
    'RenderedOutput',
    'Rule',
    'Scope',
    'annotate_lines',
    'evaluate',
    'DEFAULT_PROFILE',
    'Config',
    'get_profile',
    'list_profiles',
    'load_config',
    'parse_config',
    'ConfigMalformed',
    'ConfigUnreadable',
    'DeviceOpenFailed',
    'PelpError',
    'ProfileNotFound',
    'render',
]
