# SPDX-License-Identifier: MIT
# Copyright (c) 2025 config-scope contributors

"""Typed configuration accessors.

A small library that centralizes parsing, defaulting and validation of
configuration values read from a flat string-keyed mapping such as the
process environment.

Example:
    >>> from config_scope import ConfigScope
    >>> scope = ConfigScope.from_env()
    >>> port = scope.get_optional_integer("PORT", 8080)
    >>> debug = scope.get_optional_boolean("DEBUG", False)
"""

__version__ = "0.1.0"

from .exceptions import CONFIGURATION_ERROR, ConfigurationError
from .scope import DEFAULT_ENVIRONMENT_PARAM, ConfigScope
from .transformers import EnvValueTransformer, ensure_closing_slash_transformer
from .validators import (
    EnvValueValidator,
    create_range_validator,
    parse_integer,
    validate_number,
    validate_one_of,
)

__all__ = [
    # Version
    "__version__",
    # Scope
    "ConfigScope",
    "DEFAULT_ENVIRONMENT_PARAM",
    # Errors
    "ConfigurationError",
    "CONFIGURATION_ERROR",
    # Validation
    "EnvValueValidator",
    "create_range_validator",
    "parse_integer",
    "validate_number",
    "validate_one_of",
    # Transformation
    "EnvValueTransformer",
    "ensure_closing_slash_transformer",
]
