"""Filmly: movie catalog and favorites API"""

__version__ = "0.1.0"
