"""Console output: verbose listings and the placeholder banner."""

from pathlib import Path
from typing import Iterable, List, Mapping, Sequence


BANNER = (
    "┏━━━━━━━━━━━━━━━━━━━━━━━━━┓",
    "┃                         ┃",
    "┃  PLACEHOLDERS DETECTED  ┃",
    "┃                         ┃",
    "┗━━━━━━━━━━━━━━━━━━━━━━━━━┛",
)


def print_listing(title: str, items: Iterable) -> None:
    """Print a titled, indented list."""
    print(f"{title}:")
    for item in items:
        print(f"    {item}")


def print_variables(names: Sequence[str]) -> None:
    print(f"Found {len(names)} variable(s):")
    for name in names:
        print(f"    {name}")
    print("Enter values for each variable. Leave blank to skip.")


def print_modified(files: List[Path]) -> None:
    """List the files a dry run would modify."""
    print_listing("Replacing variables in the following files", files)


def print_placeholder_map(placeholders: Mapping[str, List[Path]]) -> None:
    """Verbose listing: each placeholder with the files it occurs in."""
    print("Placeholders:")
    for name, files in placeholders.items():
        print(f"    {name}: {', '.join(str(p) for p in files)}")


def print_placeholders(placeholders: Mapping[str, List[Path]]) -> None:
    """
    Alert the user about placeholders that still need real values.

    Prints nothing when there are none.
    """
    if not placeholders:
        return

    for line in BANNER:
        print(line)
    print("")
    print("Please replace the following placeholders with real values:")
    for name, files in placeholders.items():
        print(f"    {name}:")
        for path in files:
            print(f"        {path}")
