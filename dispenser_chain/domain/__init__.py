"""
Domain layer - Chain of responsibility for bill dispensing.

Contains:
- Denomination handlers
- Chain assembly and traversal
"""

from .handlers import DenominationHandler
from .chain import DispenseChain, build_chain


__all__ = [
    "DenominationHandler",
    "DispenseChain",
    "build_chain",
]
