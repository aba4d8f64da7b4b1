"""
Configuration Package

Environment settings for the command line and services.
"""

from .settings import Settings

__all__ = [
    "Settings",
]
