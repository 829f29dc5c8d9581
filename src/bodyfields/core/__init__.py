# topmark:header:start
#
#   project      : BodyFields
#   file         : __init__.py
#   file_relpath : src/bodyfields/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, CLI-free building blocks shared across BodyFields layers.

Exports:
    - `bodyfields.core.errors`: exception hierarchy for configuration and store errors.
"""

from __future__ import annotations

from bodyfields.core.errors import (
    BodyfieldsError,
    ConfigurationError,
    DocumentNotFoundError,
    DocumentStoreError,
    DocumentWriteError,
)

__all__ = [
    "BodyfieldsError",
    "ConfigurationError",
    "DocumentNotFoundError",
    "DocumentStoreError",
    "DocumentWriteError",
]
