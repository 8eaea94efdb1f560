# SPDX-License-Identifier: MIT
# Copyright (c) 2025 config-scope contributors

"""Root conftest.py; its presence puts the repo root on sys.path so tests can import config_scope."""
