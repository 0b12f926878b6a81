"""Collect one value per variable from presets or an interactive prompt."""

import logging
from typing import Callable, Dict, Iterable, Mapping, Optional


logger = logging.getLogger(__name__)

Prompt = Callable[[str], Optional[str]]


def terminal_prompt(name: str) -> Optional[str]:
    """Ask for a value on the terminal; end of input means skip."""
    try:
        return input(f"{name}: ")
    except EOFError:
        print()
        return None


def collect_values(
    variables: Iterable[str],
    prompt: Prompt,
    preset: Optional[Mapping[str, Optional[str]]] = None
) -> Dict[str, str]:
    """
    Build the value map, asking for each variable exactly once.

    A blank or None answer skips the variable: it is left out of the
    returned map so its tokens stay as they are.

    Args:
        variables: Variable names in the order they should be asked for
        prompt: Callable returning the value for a name, or None
        preset: Values supplied up front; these are not prompted for

    Returns:
        Mapping of variable name to non-empty value
    """
    preset = preset or {}
    values: Dict[str, str] = {}
    for name in variables:
        if name in preset:
            value = preset[name]
            logger.debug(f"Using preset value for {name}")
        else:
            value = prompt(name)
        if value:
            values[name] = value
        else:
            logger.debug(f"Skipping variable: {name}")
    return values
