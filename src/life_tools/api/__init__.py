"""
High-level API for working with pattern files.

This subpackage wraps the low-level :py:mod:`life_tools.rle` structures with
convenient methods and properties.

Key modules:

- :py:mod:`life_tools.api.pattern`: Main Pattern class
- :py:mod:`life_tools.api.pil_io`: PIL/Pillow image I/O utilities
- :py:mod:`life_tools.api.numpy_io`: NumPy array I/O utilities
"""
