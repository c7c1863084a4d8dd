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

"""Exceptions raised by the pelp collaborators. The annotator itself never raises."""


class PelpError(Exception):
    """Base class for all pelp errors"""


class ConfigUnreadable(PelpError):
    """The config file is missing or cannot be read"""


class ConfigMalformed(PelpError):
    """The config file is not valid TOML or has the wrong shape"""


class ProfileNotFound(PelpError):
    """The requested profile is not defined in the config"""


class DeviceOpenFailed(PelpError):
    """The input device cannot be opened"""
