"""
Application Services Package
"""

from .vitality_service import VitalityService
from .display_service import DisplayService

__all__ = [
    "VitalityService",
    "DisplayService",
]
