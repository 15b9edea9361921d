"""
Command Handler - Routes commands to dispense service methods.

Provides clean command routing with validation and error handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from dispenser_chain.core.exceptions import DispenserError
from dispenser_chain.loggers import logger

from .dispense_service import DispenseService


# Type alias for command handlers
CommandHandlerFunc = Callable[..., dict[str, Any]]


@dataclass
class CommandResponse:
    """
    Standardized response for command execution.

    Attributes:
        command_id: The ID of the executed command.
        success: Whether the command succeeded.
        message: Human-readable message.
        data: Optional response data.
    """

    command_id: Optional[int] = None
    success: bool = False
    message: Optional[str] = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the response to a dictionary."""
        return {
            "command_id": self.command_id,
            "success": self.success,
            "message": self.message,
            "data": self.data,
        }


@dataclass
class CommandDefinition:
    """
    Definition of a command.

    Attributes:
        name: Command name.
        handler: Handler function.
        required_args: List of required argument names.
        description: Human-readable description.
    """

    name: str
    handler: CommandHandlerFunc
    required_args: list[str]
    description: str = ""


class CommandHandler:
    """
    Routes commands to their appropriate handlers.

    Handlers return a dict with ``success``, ``message`` and ``data``.
    """

    def __init__(self, service: DispenseService) -> None:
        """
        Initialize the command handler.

        Args:
            service: The DispenseService instance.
        """
        self._service = service
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register all default command handlers."""
        self.register(
            "dispense",
            self._dispense,
            ["amount"],
            "Dispense the specified amount through the chain",
        )
        self.register(
            "denominations",
            self._denominations,
            [],
            "Get chain denominations and accepted granularity",
        )
        self.register(
            "help",
            self._help,
            [],
            "List available commands",
        )

    # -------------------------------------------------------------------------
    # Built-in commands
    # -------------------------------------------------------------------------

    def _dispense(self, amount: Any) -> dict[str, Any]:
        result = self._service.dispense(amount)
        return {
            "success": result.success,
            "message": result.message,
            "data": result.to_dict(),
        }

    def _denominations(self) -> dict[str, Any]:
        return {
            "success": True,
            "message": None,
            "data": {
                "denominations": list(self._service.chain.denominations),
                "granularity": self._service.granularity,
            },
        }

    def _help(self) -> dict[str, Any]:
        return {
            "success": True,
            "message": None,
            "data": self.get_available_commands(),
        }

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def register(
        self,
        command_name: str,
        handler: CommandHandlerFunc,
        required_args: list[str],
        description: str = "",
    ) -> None:
        """
        Register a command handler.

        Args:
            command_name: The name of the command.
            handler: The handler function.
            required_args: List of required argument names.
            description: Human-readable description.
        """
        self._commands[command_name] = CommandDefinition(
            name=command_name,
            handler=handler,
            required_args=required_args,
            description=description,
        )

    def get_available_commands(self) -> list[dict[str, Any]]:
        """Get list of available commands with their descriptions."""
        return [
            {
                "name": cmd.name,
                "required_args": cmd.required_args,
                "description": cmd.description,
            }
            for cmd in self._commands.values()
        ]

    def execute(self, command_data: dict[str, Any]) -> dict[str, Any]:
        """
        Execute a command based on command data.

        Args:
            command_data: Dictionary containing 'command', 'command_id', and 'data'.

        Returns:
            Response dictionary with execution result.
        """
        command = command_data.get("command")
        command_id = command_data.get("command_id")
        data = command_data.get("data", {}) or {}

        response = CommandResponse(command_id=command_id)

        if not isinstance(command, str) or command not in self._commands:
            logger.warning(f"Unknown command: {command}")
            response.message = f"Unknown command: {command}"
            return response.to_dict()

        if not isinstance(data, dict):
            logger.warning(f"Invalid data for command '{command}': {data!r}")
            response.message = "Command data must be an object"
            return response.to_dict()

        definition = self._commands[command]

        try:
            # Extract required arguments from data
            kwargs = {arg: data.get(arg) for arg in definition.required_args}

            # Validate required arguments
            missing = [arg for arg in definition.required_args if kwargs.get(arg) is None]
            if missing:
                response.message = f"Missing required arguments: {missing}"
                return response.to_dict()

            result = definition.handler(**kwargs)

            if isinstance(result, dict):
                response.success = result.get("success", False)
                response.message = result.get("message")
                response.data = result.get("data")
            else:
                response.success = True
                response.data = result

        except DispenserError as e:
            logger.error(f"Error executing command '{command}': {e.message}")
            response.success = False
            response.message = e.message
            response.data = e.to_dict()
        except Exception as e:
            logger.error(f"Error executing command '{command}': {e}")
            response.success = False
            response.message = f"Error: {e}"

        return response.to_dict()


def dispenser_commands(
    command_data: dict[str, Any],
    service: DispenseService,
) -> dict[str, Any]:
    """
    Execute a command against a dispense service.

    Args:
        command_data: Dictionary containing command name, ID, and data.
        service: The DispenseService instance.

    Returns:
        Response dictionary with execution result.
    """
    handler = CommandHandler(service)
    return handler.execute(command_data)
