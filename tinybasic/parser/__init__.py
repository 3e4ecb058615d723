"""Translator package for TinyBASIC.

This package splits the translator into multiple modules to keep the code
organized. The :class:`Translator` class and the :func:`translate`
shortcut are exposed at the package level for convenience.


File: __init__.py
Version: 0.1.0
License: MIT
"""

from .parser import Translator, translate

__all__ = ["Translator", "translate"]
