"""Casing and formatting transforms for single lines of text.

Installs two commands: ``textops`` applies one named transform and prints
``input -> output``, and ``textops-table`` prints CSV input as a table.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
