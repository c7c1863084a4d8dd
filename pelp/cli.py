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

"""PELP CLI - Command-line interface for the pelp package"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .annotator import annotate_lines
from .config import PelpConfig, resolve_config_path
from .device import open_device, read_lines
from .errors import DeviceOpenFailed, PelpError
from .logs import log_message, setup_logging
from .profiles import CONF_NAME, get_profile, list_profiles
from .render import BANNER, clear_screen, write_outputs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pelp',
        description='PELP - Highlight lines of device output according to a profile',
        usage='%(prog)s [options] -d DEVICE'
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-p', '--profile', type=str, metavar='PROFILE NAME',
                        help=f'name of the profile in ~/.config/{CONF_NAME} (default: default)')
    parser.add_argument('-d', '--device', type=str,
                        help='name of the device to open (e.g. /dev/ttyUSB0), or - for stdin')
    parser.add_argument('--config', type=str, metavar='FILE',
                        help=f'read profiles from FILE instead of ~/.config/{CONF_NAME}')
    parser.add_argument('--list', action='store_true',
                        help='list the profiles in the config and exit')
    parser.add_argument('--no-clear', action='store_true',
                        help='do not clear the screen or print the banner on startup')

    debug_group = parser.add_argument_group('Debug options')
    debug_group.add_argument('--log-file', type=str, metavar='FILE',
                             help='Enable debug logging to FILE')

    return parser


def run(config: PelpConfig) -> int:
    """Annotate the configured device until EOF"""
    try:
        config_path = resolve_config_path(config)
    except PelpError as e:
        log_message("ERROR", f"PELP {e}")
        return 1

    profile = get_profile(config.profile, config_path)

    print(f"PELP attempting to open {config.device}...")
    try:
        stream = open_device(config.device)
    except DeviceOpenFailed as e:
        print("PELP failed to open device")
        log_message("ERROR", f"PELP {e}")
        return 1
    print("PELP opened device successfully!")
    sys.stdout.flush()

    with stream:
        count = write_outputs(annotate_lines(read_lines(stream), profile), sys.stdout)

    log_message("INFO", f"Device reached EOF after {count} output line(s)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = PelpConfig.from_env()
    config.merge_with_args(args)

    # Set up logging early if log file specified (before any other operations)
    if config.log_file:
        setup_logging(config.log_file, mode='w')
    log_message("DEBUG", f"Configuration: {config.to_dict()}")

    if args.list:
        try:
            config_path = resolve_config_path(config)
        except PelpError as e:
            log_message("ERROR", f"PELP {e}")
            return 1
        for name in list_profiles(config_path):
            print(name)
        return 0

    if not config.device:
        parser.error("a device is required (-d DEVICE or $PELP_DEVICE)")

    if config.clear_screen:
        clear_screen(sys.stdout)
        print(BANNER)

    try:
        return run(config)
    except KeyboardInterrupt:
        return 130  # Standard exit code for Ctrl+C


if __name__ == '__main__':
    sys.exit(main())
