"""
Structured logging utility for schema derivation.

Messages are prefixed with ``key=value`` fields (component, type, depth, ...)
so derivation traces can be grepped the same way across modules.
"""

import logging
from typing import Any, Optional


class SchemaLogger:
    """Structured logger for schema components."""

    def __init__(self, component: str):
        """
        Initialize logger for a specific component.

        Args:
            component: Name of the component (e.g., "derivation", "rendering")
        """
        self.component = component
        self.logger = logging.getLogger(f"steer_schema.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, type_name: Optional[str] = None, **kwargs: Any):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, type=type_name, **kwargs))

    def warning(self, message: str, type_name: Optional[str] = None, **kwargs: Any):
        """Log warning message with structured fields."""
        self.logger.warning(self._format_message(message, type=type_name, **kwargs))

    def error(self, message: str, type_name: Optional[str] = None,
              error: Optional[Exception] = None, **kwargs: Any):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(self._format_message(message, type=type_name, **kwargs))
