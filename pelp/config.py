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
config.py - Centralized configuration management for pelp
Single source of truth for all configuration values
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from .errors import PelpError
from .logs import log_message
from .profiles import CONF_NAME

# Load .env first (takes precedence)
load_dotenv()
# Also load .pelp.env (won't override existing vars from .env)
load_dotenv('.pelp.env')


@dataclass
class PelpConfig:
    """Centralized configuration for all pelp components"""

    profile: str = "default"
    device: Optional[str] = None
    config_path: Optional[str] = None
    log_file: Optional[str] = None
    clear_screen: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'PelpConfig':
        """Create configuration from environment variables"""
        env = os.environ if environ is None else environ
        config = cls()

        config.profile = env.get('PELP_PROFILE', 'default')
        config.device = env.get('PELP_DEVICE')
        config.config_path = env.get('PELP_CONFIG')
        config.log_file = env.get('PELP_LOG_FILE')
        config.clear_screen = env.get('PELP_NO_CLEAR', 'false').lower() != 'true'

        return config

    def merge_with_args(self, args: Any) -> None:
        """Merge command-line arguments with configuration"""
        if getattr(args, 'profile', None):
            self.profile = args.profile

        if getattr(args, 'device', None):
            self.device = args.device

        if getattr(args, 'config', None):
            self.config_path = args.config

        if getattr(args, 'log_file', None):
            self.log_file = args.log_file

        if getattr(args, 'no_clear', False):
            self.clear_screen = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith('_')
        }


def resolve_config_path(config: PelpConfig, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Work out where pelp.toml lives.

    An explicit path wins. Otherwise the file sits in ~/.config of the
    invoking user: $SUDO_HOME when running under sudo, else $HOME.
    """
    if config.config_path:
        return Path(config.config_path)

    env = os.environ if environ is None else environ

    home = env.get('SUDO_HOME')
    if not home:
        print("PELP failed to get $SUDO_HOME, are you running as sudo?", file=sys.stderr)
        print("PELP retrying with $HOME")
        home = env.get('HOME')
        if not home:
            raise PelpError("neither $SUDO_HOME nor $HOME is set")

    path = Path(home) / ".config" / CONF_NAME
    log_message("DEBUG", f"Resolved config path {path}")
    return path
