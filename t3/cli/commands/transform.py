"""Transform command: scan, prompt, substitute, report."""

import logging
from argparse import Namespace
from pathlib import Path

from t3.exceptions import ConfigError, T3Error
from t3.loader import load_presets
from t3.report import (
    print_listing,
    print_modified,
    print_placeholder_map,
    print_placeholders,
    print_variables,
)
from t3.tokens.scanner import scan_files
from t3.variables.collector import Prompt, collect_values, terminal_prompt
from t3.variables.substitution import substitute_files
from t3.walker import DEFAULT_IGNORED_DIRS, walk_files


logger = logging.getLogger(__name__)


def resolve_root(root: str) -> Path:
    """Check the scan root exists and is a directory."""
    path = Path(root)
    if not path.is_dir():
        raise ConfigError(f"Root is not a directory: {path}", path)
    return path


def transform_tree(args: Namespace, prompt: Prompt = terminal_prompt) -> int:
    """
    Run the transformer over the tree rooted at args.root.

    Args:
        args: Parsed CLI arguments
        prompt: Source of values for variables without a preset

    Returns:
        Process exit code
    """
    log_level = getattr(logging, args.log_level.upper())
    if args.debug or args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    verbose = args.verbose
    ignored_dirs = list(dict.fromkeys(args.ignore or DEFAULT_IGNORED_DIRS))

    try:
        root = resolve_root(args.root)
        presets = load_presets(args.value, args.values_file)

        if verbose:
            print_listing("Ignored directories", ignored_dirs)

        files = walk_files(root, ignored_dirs)
        if verbose:
            print_listing("Files to process", files)

        scan = scan_files(files)
        if verbose:
            print_listing("Variables", scan.variable_names)
            print_placeholder_map(scan.placeholders)
            print_listing("Files with variables", scan.files)

        print_variables(scan.variable_names)
        values = collect_values(scan.variable_names, prompt, presets)

        modified = substitute_files(scan.files, values, dry_run=args.dry_run)
        if args.dry_run:
            print_modified(modified)
        else:
            logger.info(f"Modified {len(modified)} file(s)")

        print_placeholders(scan.placeholders)
        return 0

    except T3Error as e:
        logger.error(str(e))
        return e.exit_code
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130
