"""
Inbound Ports Package
"""

from .vitality_port import IVitalityUseCase

__all__ = [
    "IVitalityUseCase",
]
