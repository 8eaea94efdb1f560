# SPDX-License-Identifier: MIT
# Copyright (c) 2025 config-scope contributors

"""Typed accessors over a flat string-keyed environment mapping."""

import logging
import os
from typing import Mapping, Optional, Sequence, TypeVar

from .exceptions import ConfigurationError
from .transformers import EnvValueTransformer
from .validators import EnvValueValidator, parse_integer, validate_number, validate_one_of

logger = logging.getLogger(__name__)

T = TypeVar("T")
OutputT = TypeVar("OutputT")

DEFAULT_ENVIRONMENT_PARAM = "NODE_ENV"

_BOOLEAN_VALUES = ["true", "false"]


def _is_absent(value: Optional[str]) -> bool:
    return value is None


def _is_absent_or_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


class ConfigScope:
    """Typed, validating view over a mapping of configuration parameters.

    The scope never mutates the mapping it wraps and keeps no state besides
    it, so every getter returns the same result (or raises the same error)
    for the same arguments.

    Two presence rules apply:

    - Mandatory getters and integer getters treat both a missing key and an
      empty string as "not configured".
    - ``get_optional`` does the same, while ``get_optional_nullable`` treats
      only a missing key (or a None value) as "not configured" and returns an
      empty string unchanged.

    Values such as ``"false"``, ``"0"`` or ``"null"`` are always present and
    are returned verbatim by the string getters.

    Example:
        >>> scope = ConfigScope({"PORT": "8080", "LOG_LEVEL": "debug"})
        >>> scope.get_mandatory_integer("PORT")
        8080
        >>> scope.get_mandatory_one_of("LOG_LEVEL", ["debug", "info"])
        'debug'
        >>> scope.get_optional("HOST", "localhost")
        'localhost'
    """

    def __init__(
        self,
        env: Mapping[str, Optional[str]],
        environment_param: str = DEFAULT_ENVIRONMENT_PARAM,
    ):
        """Initialize the scope.

        Args:
            env: Mapping of parameter names to raw string values
            environment_param: Parameter holding the deployment environment
                name, consulted by is_production/is_development/is_test
        """
        self._env = env
        self._environment_param = environment_param

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        environment_param: str = DEFAULT_ENVIRONMENT_PARAM,
    ) -> "ConfigScope":
        """Create a scope from a snapshot of the process environment.

        Args:
            environ: Mapping to snapshot instead of os.environ
            environment_param: See __init__

        Returns:
            ConfigScope isolated from later environment changes
        """
        source = environ if environ is not None else os.environ
        snapshot = dict(source)
        logger.debug("Created configuration scope from %d environment variables", len(snapshot))
        return cls(snapshot, environment_param=environment_param)

    def _missing(self, param: str) -> ConfigurationError:
        return ConfigurationError(f"Missing mandatory configuration parameter: {param}")

    def _parse_integer(self, param: str, raw_value: str) -> int:
        return validate_number(
            parse_integer(raw_value),
            f"Configuration parameter {param} must be a number, but was {raw_value}",
        )

    def get_mandatory(self, param: str) -> str:
        """Get a parameter that must be set to a non-empty string.

        Raises:
            ConfigurationError: If the parameter is missing or empty
        """
        result = self._env.get(param)
        if _is_absent_or_empty(result):
            raise self._missing(param)
        return result

    def get_mandatory_integer(self, param: str) -> int:
        """Get a parameter that must be set to an integer.

        Parsing is lenient: trailing characters after the leading digits
        are ignored.

        Raises:
            ConfigurationError: If the parameter is missing, empty or not numeric
        """
        raw_value = self._env.get(param)
        if _is_absent_or_empty(raw_value):
            raise self._missing(param)
        return self._parse_integer(param, raw_value)

    def get_mandatory_one_of(self, param: str, supported_values: Sequence[T]) -> T:
        """Get a mandatory parameter restricted to a set of supported values.

        Raises:
            ConfigurationError: If the parameter is missing or unsupported
        """
        result = self.get_mandatory(param)
        return validate_one_of(
            result,
            supported_values,
            f"Unsupported {param}: {result}. "
            f"Supported values: {','.join(str(value) for value in supported_values)}",
        )

    def get_mandatory_validated_integer(self, param: str, validator: EnvValueValidator[int]) -> int:
        """Get a mandatory integer that must satisfy a validator.

        Raises:
            ConfigurationError: If the parameter is missing, not numeric or
                rejected by the validator
        """
        value = self.get_mandatory_integer(param)
        if not validator(value):
            raise ConfigurationError(f"Value {value} is invalid for parameter {param}")
        return value

    def get_mandatory_transformed(self, param: str, transformer: EnvValueTransformer[str, OutputT]) -> OutputT:
        """Get a mandatory parameter passed through a transformer."""
        return transformer(self.get_mandatory(param))

    def get_optional(self, param: str, default_value: str) -> str:
        """Get a string parameter, falling back when it is missing or empty.

        An empty value (``VAR=`` in a .env file) counts as not configured.
        """
        value = self._env.get(param)
        if _is_absent_or_empty(value):
            return default_value
        return value

    def get_optional_nullable(self, param: str, default_value: T) -> T | str:
        """Get a string parameter whose default may be None.

        Only a missing key falls back to the default; an empty string is
        returned as-is.
        """
        value = self._env.get(param)
        if _is_absent(value):
            return default_value
        return value

    def get_optional_integer(self, param: str, default_value: int) -> int:
        """Get an integer parameter, falling back when it is missing or empty.

        Raises:
            ConfigurationError: If the parameter is set but not numeric
        """
        raw_value = self._env.get(param)
        if _is_absent_or_empty(raw_value):
            return default_value
        return self._parse_integer(param, raw_value)

    def get_optional_nullable_integer(self, param: str, default_value: T) -> T | int:
        """Get an integer parameter whose default may be None.

        Raises:
            ConfigurationError: If the parameter is set but not numeric
        """
        raw_value = self._env.get(param)
        if _is_absent_or_empty(raw_value):
            return default_value
        return self._parse_integer(param, raw_value)

    def get_optional_validated_integer(
        self,
        param: str,
        default_value: int,
        validator: EnvValueValidator[int],
    ) -> int:
        """Get an optional integer that must satisfy a validator.

        The validator is applied to the default as well.

        Raises:
            ConfigurationError: If the value is not numeric or is rejected
        """
        value = self.get_optional_integer(param, default_value)
        if not validator(value):
            raise ConfigurationError(f"Value {value} is invalid for parameter {param}")
        return value

    def get_optional_transformed(
        self,
        param: str,
        default_value: str,
        transformer: EnvValueTransformer[str, OutputT],
    ) -> OutputT:
        """Get an optional parameter (or its default) passed through a transformer."""
        return transformer(self.get_optional(param, default_value))

    def get_optional_nullable_transformed(
        self,
        param: str,
        default_value: Optional[str],
        transformer: EnvValueTransformer[Optional[str], OutputT],
    ) -> OutputT:
        """Get a nullable parameter (or its default) passed through a transformer."""
        return transformer(self.get_optional_nullable(param, default_value))

    def get_optional_boolean(self, param: str, default_value: bool) -> bool:
        """Get a boolean parameter.

        Accepts "true" and "false" in any letter case.

        Raises:
            ConfigurationError: If the parameter is set to anything else
        """
        raw_value = self._env.get(param)
        if _is_absent_or_empty(raw_value):
            return default_value

        raw_value = raw_value.lower()
        validate_one_of(raw_value, _BOOLEAN_VALUES)
        return raw_value == "true"

    def is_production(self) -> bool:
        return self._env.get(self._environment_param) == "production"

    def is_development(self) -> bool:
        """True for every environment other than production, test included."""
        return self._env.get(self._environment_param) != "production"

    def is_test(self) -> bool:
        return self._env.get(self._environment_param) == "test"
