"""
Dart exports — generate barrel files for Dart/Flutter source trees.
"""

__version__ = "0.1.0"
