"""
Movie Catalog Application Package.

This package contains an in-memory movie catalog served over HTTP, including
payload validation, the movie store, origin restriction, and utilities.
"""

__version__ = "1.0.0"
