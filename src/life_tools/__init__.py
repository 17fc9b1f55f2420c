"""
life-tools: Python package for reading and writing Life RLE pattern files.

The RLE format describes a two-state grid: a header line declaring the
width, height and rule, followed by run-length encoded rows of dead and
alive cells ending with ``!``.

Basic usage::

    from life_tools import Pattern

    # Open and read an RLE file
    pattern = Pattern.open('glider.rle')

    # Iterate through live cells
    for x, y in pattern:
        print(x, y)

    # Export to PNG
    pattern.topil().save('glider.png')

Architecture:

- :py:mod:`life_tools.rle`: Low-level text structure parsing/writing
- :py:mod:`life_tools.api`: High-level user-facing API (primary interface)
- :py:mod:`life_tools.rule`: Birth/survival rules

For most users, the :py:class:`Pattern` class provides all necessary
functionality. Advanced users can access low-level structures via the
``_record`` attribute.
"""

from life_tools.api.pattern import Pattern
from life_tools.rle import Rle, RleBuilder
from life_tools.rule import Rule
from life_tools.version import __version__

__all__ = ["Pattern", "Rle", "RleBuilder", "Rule", "__version__"]
