"""
Rename episode files from a regular expression and a set of defaults.

Each file in a directory is matched against a user pattern with optional
`season` and `ep` named groups. The captured numbers, together with a
configured title, year, source, clarity and encode, are rendered as

    <name>.<year>.S<season>E<episode>.<source>.<clarity>.<encode>.<ext>

and the file is renamed in place.

The package is organized as:
- rename: matching, formatting and batch renaming.
- utils: constants, structured logging and filesystem helpers.
- cli: the `rer` command.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
