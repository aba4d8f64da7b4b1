"""
Application Ports Package
"""

from .inbound import IVitalityUseCase

__all__ = [
    "IVitalityUseCase",
]
