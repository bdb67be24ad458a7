"""BLOGUSER

An in-memory registry of blog users. Users are created with generated
identifiers, stored under a key with duplicate detection, and read back with
existence checking.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
