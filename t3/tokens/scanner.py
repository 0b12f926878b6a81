"""
Token scanner.

A token is the literal TODO, a run of one or more underscores, a name, and
the same underscore run again: TODO_X_, TODO__X__ and TODO___X___ are all the
same variable X. Extra underscores let a name contain underscores itself
(TODO__MY_VAR__).

Names starting with '!' are placeholders: they are reported but never
substituted.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List

from t3.textio import read_text


logger = logging.getLogger(__name__)

# The backreference keeps open and close fences identical. A name never
# crosses a line terminator.
TOKEN_PATTERN = re.compile(r'TODO(_+)([^\n\r\u2028\u2029]*?)\1')

PLACEHOLDER_PREFIX = '!'


class TokenKind(Enum):
    """Whether a token asks for a value or is left for manual follow-up."""
    VARIABLE = "variable"
    PLACEHOLDER = "placeholder"


def classify(name: str) -> TokenKind:
    """Classify a token name by its leading '!'."""
    if name.startswith(PLACEHOLDER_PREFIX):
        return TokenKind.PLACEHOLDER
    return TokenKind.VARIABLE


@dataclass(frozen=True)
class Token:
    """A single token occurrence in a text."""
    text: str
    delimiter: str
    name: str
    start: int
    end: int

    @property
    def kind(self) -> TokenKind:
        return classify(self.name)

    @property
    def display_name(self) -> str:
        """Name without the placeholder prefix."""
        if self.kind is TokenKind.PLACEHOLDER:
            return self.name[len(PLACEHOLDER_PREFIX):]
        return self.name

    @classmethod
    def from_match(cls, match: 're.Match[str]') -> 'Token':
        return cls(
            text=match.group(0),
            delimiter=match.group(1),
            name=match.group(2),
            start=match.start(),
            end=match.end(),
        )


def find_tokens(text: str) -> List[Token]:
    """Find all non-overlapping tokens in text, left to right."""
    return [Token.from_match(m) for m in TOKEN_PATTERN.finditer(text)]


@dataclass
class ScanResult:
    """Everything the scan pass learned about the candidate files."""
    # dict keys keep first-seen order; values unused
    variables: Dict[str, None] = field(default_factory=dict)
    placeholders: Dict[str, List[Path]] = field(default_factory=dict)
    files: List[Path] = field(default_factory=list)

    @property
    def variable_names(self) -> List[str]:
        return list(self.variables)

    def add_token(self, token: Token, path: Path) -> None:
        if token.kind is TokenKind.PLACEHOLDER:
            self.placeholders.setdefault(token.display_name, []).append(path)
        else:
            self.variables.setdefault(token.name, None)


def scan_files(files: Iterable[Path]) -> ScanResult:
    """
    Scan candidate files for tokens.

    Args:
        files: Candidate file paths, in walk order

    Returns:
        ScanResult with variables in first-seen order, placeholder
        occurrences per name, and only the files that contain tokens

    Raises:
        ReadError: If a file cannot be read
    """
    result = ScanResult()
    for path in files:
        tokens = find_tokens(read_text(path))
        if not tokens:
            continue
        logger.debug(f"{path}: {len(tokens)} token(s)")
        result.files.append(path)
        for token in tokens:
            result.add_token(token, path)
    return result
