# SPDX-License-Identifier: MIT
# Copyright (c) 2025 config-scope contributors

"""Exceptions for configuration access."""

CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class ConfigurationError(Exception):
    """Raised when a configuration parameter is missing or invalid.

    Attributes:
        message: Human-readable description of the problem
        error_code: Error classification, always ``CONFIGURATION_ERROR``
    """

    def __init__(self, message: str, error_code: str = CONFIGURATION_ERROR):
        self.message = message
        self.error_code = error_code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, error_code={self.error_code!r})"
