"""
Unit tests for the dispense service and command routing.
"""

import logging

import pytest

from dispenser_chain.application.command_handler import CommandHandler, dispenser_commands
from dispenser_chain.application.dispense_service import DispenseService
from dispenser_chain.configs import DEFAULT_DENOMINATIONS, LOGGER_NAME
from dispenser_chain.core.exceptions import (
    DispenserError,
    InputGranularityError,
    InvalidAmountError,
    InvalidGranularityError,
)
from dispenser_chain.infrastructure.settings import (
    DispenserSettings,
    Settings,
    get_settings,
)


# =============================================================================
# Dispense Service Tests
# =============================================================================


class TestDispenseService:
    """Tests for DispenseService."""

    def test_dispense_valid_amount(self, service):
        """Test dispensing an amount that passes validation."""
        result = service.dispense(2970)
        assert result.bills == {1000: 2, 500: 1, 100: 4}
        assert result.remaining_amount == 70

    def test_granularity_rejected_before_chain(self, service, monkeypatch):
        """Test that off-granularity amounts never reach the chain."""
        calls = []
        monkeypatch.setattr(service.chain, "dispense", lambda amount: calls.append(amount))
        with pytest.raises(InputGranularityError) as exc_info:
            service.dispense(2975)
        assert exc_info.value.details == {"amount": 2975, "granularity": 10}
        assert calls == []

    def test_negative_amount_rejected(self, service):
        """Test that negative amounts are rejected."""
        with pytest.raises(InvalidAmountError):
            service.validate(-10)

    def test_validate_returns_int(self, service):
        """Test that validate passes valid amounts through."""
        assert service.validate(0) == 0
        assert service.validate(120) == 120

    def test_custom_granularity(self, default_chain):
        """Test a coarser granularity."""
        service = DispenseService(default_chain, granularity=100)
        with pytest.raises(InputGranularityError):
            service.dispense(2970)
        assert service.dispense(2900).success is True

    @pytest.mark.parametrize("granularity", [0, -10, "10", 2.5, True, None])
    def test_invalid_granularity(self, default_chain, granularity):
        """Test that granularity must be a positive whole number."""
        with pytest.raises(InvalidGranularityError) as exc_info:
            DispenseService(default_chain, granularity=granularity)
        assert isinstance(exc_info.value, DispenserError)
        assert exc_info.value.details == {"granularity": granularity}

    def test_from_settings(self):
        """Test building a service from settings."""
        settings = Settings(dispenser=DispenserSettings(denominations=(100, 20), granularity=20))
        service = DispenseService.from_settings(settings)
        assert service.chain.denominations == (100, 20)
        assert service.granularity == 20

    def test_from_default_settings(self):
        """Test building a service from the settings singleton."""
        service = DispenseService.from_settings()
        assert service.chain.denominations == DEFAULT_DENOMINATIONS

    def test_logs_report_lines(self, service, caplog):
        """Test that report lines are logged with matching levels."""
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            service.dispense(170)
        messages = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.INFO, "Dispensing 1 100 bills") in messages
        assert (logging.WARNING, "Cannot dispense remaining amount: 70") in messages


class TestSettings:
    """Tests for settings."""

    def test_settings_singleton(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_default_settings(self):
        """Test default dispenser settings."""
        settings = Settings()
        assert settings.dispenser.denominations == (1000, 500, 100)
        assert settings.dispenser.granularity == 10
        assert settings.dispenser.smallest_denomination == 100
        assert settings.logging.loki_url is None


# =============================================================================
# Command Handler Tests
# =============================================================================


class TestCommandHandler:
    """Tests for command routing."""

    def test_dispense_command(self, service):
        """Test the dispense command."""
        response = CommandHandler(service).execute(
            {"command": "dispense", "command_id": 7, "data": {"amount": 2000}}
        )
        assert response["command_id"] == 7
        assert response["success"] is True
        assert response["data"]["bills"] == {"1000": 2}

    def test_dispense_command_partial(self, service):
        """Test that a remainder makes the command unsuccessful."""
        response = dispenser_commands(
            {"command": "dispense", "command_id": 1, "data": {"amount": 2970}}, service
        )
        assert response["success"] is False
        assert response["data"]["remaining_amount"] == 70

    def test_granularity_error_response(self, service):
        """Test that domain errors become failed responses."""
        response = dispenser_commands(
            {"command": "dispense", "command_id": 2, "data": {"amount": 25}}, service
        )
        assert response["success"] is False
        assert response["data"]["error"] == "InputGranularityError"
        assert "multiple of 10" in response["message"]

    def test_non_integer_amount_response(self, service):
        """Test that a non-integer amount is rejected."""
        response = dispenser_commands(
            {"command": "dispense", "data": {"amount": "100"}}, service
        )
        assert response["success"] is False
        assert response["data"]["error"] == "InvalidAmountError"

    def test_unknown_command(self, service):
        """Test that unknown commands fail."""
        response = dispenser_commands({"command": "withdraw"}, service)
        assert response["success"] is False
        assert response["message"] == "Unknown command: withdraw"

    def test_missing_arguments(self, service):
        """Test that missing arguments fail."""
        response = dispenser_commands({"command": "dispense", "data": {}}, service)
        assert response["success"] is False
        assert response["message"] == "Missing required arguments: ['amount']"

    def test_denominations_command(self, service):
        """Test the denominations command."""
        response = dispenser_commands({"command": "denominations"}, service)
        assert response["success"] is True
        assert response["data"] == {"denominations": [1000, 500, 100], "granularity": 10}

    def test_help_lists_commands(self, service):
        """Test that help lists all registered commands."""
        response = dispenser_commands({"command": "help"}, service)
        names = [c["name"] for c in response["data"]]
        assert names == ["dispense", "denominations", "help"]

    def test_register_custom_command(self, service):
        """Test registering an additional command."""
        handler = CommandHandler(service)
        handler.register(
            "ping",
            lambda: {"success": True, "message": "pong"},
            [],
            "Health check",
        )
        assert handler.execute({"command": "ping"})["message"] == "pong"

    @pytest.mark.parametrize("data", [[2000], 5, "amount=2000"])
    def test_non_object_data(self, service, data):
        """Test that data which is not an object gives a failed response."""
        response = dispenser_commands({"command": "dispense", "command_id": 3, "data": data}, service)
        assert response["command_id"] == 3
        assert response["success"] is False
        assert response["message"] == "Command data must be an object"

    @pytest.mark.parametrize("command", [["dispense"], {"name": "help"}, 42, None])
    def test_non_string_command(self, service, command):
        """Test that a command name which is not a string is unknown."""
        response = dispenser_commands({"command": command}, service)
        assert response["success"] is False
        assert response["message"].startswith("Unknown command")

    def test_unexpected_handler_error(self, service):
        """Test that any handler exception becomes a failed response."""
        handler = CommandHandler(service)

        def broken() -> dict:
            raise RuntimeError("cassette jammed")

        handler.register("broken", broken, [], "Always fails")
        response = handler.execute({"command": "broken", "command_id": 9})
        assert response == {
            "command_id": 9,
            "success": False,
            "message": "Error: cassette jammed",
            "data": None,
        }
        assert handler.execute({"command": "help"})["success"] is True

    def test_non_dict_handler_result(self, service):
        """Test that a plain handler return value becomes the data."""
        handler = CommandHandler(service)
        handler.register("version", lambda: "1.0.0", [])
        response = handler.execute({"command": "version"})
        assert response["success"] is True
        assert response["data"] == "1.0.0"
