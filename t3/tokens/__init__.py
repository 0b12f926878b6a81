"""
Template token scanning.
Finds TODO_NAME_ tokens and sorts them into variables and placeholders.
"""

from .scanner import (
    PLACEHOLDER_PREFIX,
    TOKEN_PATTERN,
    ScanResult,
    Token,
    TokenKind,
    classify,
    find_tokens,
    scan_files,
)

__all__ = [
    'PLACEHOLDER_PREFIX',
    'TOKEN_PATTERN',
    'ScanResult',
    'Token',
    'TokenKind',
    'classify',
    'find_tokens',
    'scan_files',
]
