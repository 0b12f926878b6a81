"""Main CLI entry point for t3."""

import argparse
import sys
from typing import Optional

from .commands import transform_tree


DESCRIPTION = """\
Text Template Transformer.

Scans the current directory and all subdirectories for files that contain
template variables of the form TODO_XXX_, where XXX is the name of the
variable. The first time a variable is encountered you are prompted for a
value, which is then substituted for the variable in all files.

The number of underscores after TODO can be increased if the variable needs
to contain underscores. TODO_X_, TODO__X__ and TODO___X___ are all valid and
equivalent.
"""

EPILOG = """\
variable formats:
  TODO_XXX_     prompts the user for a value
  TODO_!XXX_    complex placeholder; skips the prompt and is reported at the
                end of the run as needing a real value
"""


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the t3 CLI."""
    parser = argparse.ArgumentParser(
        prog='t3',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--ignore',
        action='append',
        metavar='DIR',
        help='Ignore directories with this name (can be specified multiple times; '
             'defaults to ".git" and "node_modules")'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print debugging information'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the files that would be modified, but do not modify them'
    )
    parser.add_argument(
        '--root',
        type=str,
        default='.',
        metavar='DIR',
        help='Directory to scan (default: current directory)'
    )
    parser.add_argument(
        '--value',
        action='append',
        metavar='KEY=VALUE',
        help='Preset a variable value instead of prompting (can be specified multiple times)'
    )
    parser.add_argument(
        '--values-file',
        type=str,
        metavar='PATH',
        help='YAML or JSON file mapping variable names to values'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )
    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return transform_tree(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
