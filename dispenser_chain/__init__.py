"""
ATM bill dispenser built as a chain of responsibility.

Layers:
- core: exceptions, interfaces, value objects
- domain: denomination handlers and the dispense chain
- application: dispense service and command routing
- infrastructure: settings
"""

__version__ = "1.0.0"
