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

"""Profile loading for pelp - Reads the TOML config and resolves a named profile into an ordered tuple of rules."""

import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from .annotator import Profile, Rule
from .errors import ConfigMalformed, ConfigUnreadable, ProfileNotFound
from .logs import log_message

CONF_NAME = "pelp.toml"

# Used whenever the requested profile cannot be found: one rule that matches every line
DEFAULT_PROFILE: Profile = (Rule(),)

# TOML key -> (Rule attribute, expected type)
_RULE_FIELDS = {
    'trigger': ('pattern', str),
    'where': ('scope', str),
    'replace': ('do_substitute', bool),
    'replace_with': ('substitute_with', str),
    'ignore': ('skip', bool),
    'color': ('style', str),
}


@dataclass
class Config:
    """Parsed contents of pelp.toml"""

    version: str = ""
    profiles: Dict[str, Profile] = field(default_factory=dict)


def _parse_rule(profile_name: str, index: int, entry: Any) -> Rule:
    """Build a Rule from one [[profiles.<name>]] table"""
    if not isinstance(entry, dict):
        raise ConfigMalformed(f"profile '{profile_name}' entry {index} is not a table")

    kwargs: Dict[str, Any] = {}
    for key, (attr, expected) in _RULE_FIELDS.items():
        if key not in entry:
            continue
        value = entry[key]
        if not isinstance(value, expected):
            raise ConfigMalformed(
                f"profile '{profile_name}' entry {index}: '{key}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        kwargs[attr] = value

    return Rule(**kwargs)


def parse_config(text: str) -> Config:
    """Parse the text of a pelp.toml file"""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigMalformed(str(e)) from e

    version = data.get('version', "")
    if not isinstance(version, str):
        raise ConfigMalformed("'version' must be a string")

    raw_profiles = data.get('profiles', {})
    if not isinstance(raw_profiles, dict):
        raise ConfigMalformed("'profiles' must be a table")

    profiles: Dict[str, Profile] = {}
    for name, entries in raw_profiles.items():
        if not isinstance(entries, list):
            raise ConfigMalformed(f"profile '{name}' must be an array of tables")
        profiles[name] = tuple(_parse_rule(name, i, entry) for i, entry in enumerate(entries))

    return Config(version=version, profiles=profiles)


def load_config(config_path: Union[str, Path]) -> Config:
    """Read and parse a config file"""
    path = Path(config_path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigUnreadable(f"failed to read {path}: {e}") from e
    return parse_config(text)


def find_profile(config: Config, name: str) -> Profile:
    """Look up a profile by name"""
    try:
        return config.profiles[name]
    except KeyError:
        raise ProfileNotFound(f"no profile named '{name}'") from None


def _load_config_or_empty(config_path: Union[str, Path]) -> Config:
    """Load the config, reporting failures on stderr and falling back to an empty config"""
    try:
        return load_config(config_path)
    except ConfigUnreadable as e:
        print(f"PELP {e}", file=sys.stderr)
        log_message("WARNING", str(e))
    except ConfigMalformed as e:
        print(f"PELP failed to parse config: {e}", file=sys.stderr)
        log_message("WARNING", f"Failed to parse config: {e}")
    return Config()


def get_profile(name: str, config_path: Union[str, Path]) -> Profile:
    """Resolve a profile by name. Never fails: every config problem falls back to DEFAULT_PROFILE."""
    print(f'PELP attempting to get profile "{name}" from {config_path}')
    log_message("INFO", f"Loading profile '{name}' from {config_path}")

    config = _load_config_or_empty(config_path)

    try:
        profile = find_profile(config, name)
    except ProfileNotFound as e:
        print(f"PELP failed to find profile \"{name}\", using default", file=sys.stderr)
        log_message("WARNING", f"{e}, using default profile")
        profile = DEFAULT_PROFILE

    print("PELP finished getting profile")
    log_message("INFO", f"Profile '{name}' has {len(profile)} rule(s)")
    return profile


def list_profiles(config_path: Union[str, Path]) -> List[str]:
    """Return the names of all profiles in the config, sorted"""
    return sorted(_load_config_or_empty(config_path).profiles)
