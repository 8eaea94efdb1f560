# SPDX-License-Identifier: MIT
# Copyright (c) 2025 config-scope contributors

"""Transformers applied to raw configuration values."""

from typing import Callable, Optional, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")

EnvValueTransformer = Callable[[InputT], OutputT]


def ensure_closing_slash_transformer(value: Optional[str]) -> str:
    """Append a trailing slash to a URL or path unless it already has one.

    None and the empty string become the empty string.
    """
    if not value:
        return ""
    if value.endswith("/"):
        return value
    return f"{value}/"
