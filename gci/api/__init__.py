"""
APIs REST de GCI
"""
from .gci import bp as gci_bp

__all__ = [
    "gci_bp",
]
