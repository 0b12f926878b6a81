"""t3: Text Template Transformer.

Scans a directory tree for TODO_XXX_ template variables, prompts for their
values and substitutes them in place.
"""

__version__ = "0.1.0"
