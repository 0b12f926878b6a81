"""
Value collection and substitution for template variables.
"""

from .collector import collect_values, terminal_prompt
from .substitution import TokenSubstitutor, substitute_files

__all__ = ['collect_values', 'terminal_prompt', 'TokenSubstitutor', 'substitute_files']
