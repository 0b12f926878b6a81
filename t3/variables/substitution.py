"""
Variable substitution implementation.
Replaces TODO_NAME_ variables with collected values, in text and in files.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Mapping

from t3.textio import read_text, write_text
from t3.tokens.scanner import TOKEN_PATTERN, Token, TokenKind


logger = logging.getLogger(__name__)


class TokenSubstitutor:
    """
    Handles variable substitution in template text.

    Rules per token:
    - placeholder (TODO_!X_): left as is
    - variable with a value: replaced by the raw value
    - variable without a value: left as is
    """

    def substitute(self, text: str, values: Mapping[str, str]) -> str:
        """
        Substitute variables in a string.

        Replacement values are inserted verbatim and not scanned again.

        Args:
            text: Text containing TODO_NAME_ tokens
            values: Variable name to value

        Returns:
            Text with variables substituted
        """
        def replace_token(match):
            token = Token.from_match(match)
            if token.kind is TokenKind.PLACEHOLDER:
                return token.text
            value = values.get(token.name)
            if value:
                return value
            return token.text

        return TOKEN_PATTERN.sub(replace_token, text)


def substitute_files(
    files: Iterable[Path],
    values: Mapping[str, str],
    dry_run: bool = False
) -> List[Path]:
    """
    Apply substitutions to each file in the file set.

    Only files whose text changes are written. In dry-run mode nothing is
    written.

    Args:
        files: Files known to contain tokens
        values: Variable name to value
        dry_run: Report instead of writing

    Returns:
        Files that were (or, in dry-run mode, would be) modified

    Raises:
        ReadError: If a file cannot be re-read
        WriteError: If a file cannot be written
    """
    substitutor = TokenSubstitutor()
    modified: List[Path] = []
    for path in files:
        text = read_text(path)
        new_text = substitutor.substitute(text, values)
        if new_text == text:
            logger.debug(f"No changes for {path}")
            continue
        modified.append(path)
        if dry_run:
            logger.debug(f"[DRY RUN] Would write {path}")
        else:
            write_text(path, new_text)
            logger.debug(f"Wrote {path}")
    return modified
