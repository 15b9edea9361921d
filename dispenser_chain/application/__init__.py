"""
Application layer - Application services and use cases.

Contains:
- Dispense service
- Command handlers
"""

from .dispense_service import DispenseService
from .command_handler import CommandHandler, CommandResponse, dispenser_commands


__all__ = [
    "DispenseService",
    "CommandHandler",
    "CommandResponse",
    "dispenser_commands",
]
