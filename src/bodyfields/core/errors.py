# topmark:header:start
#
#   project      : BodyFields
#   file         : errors.py
#   file_relpath : src/bodyfields/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the BodyFields core and its document stores.

These exceptions are CLI-agnostic. The CLI layer maps them onto
`click.ClickException` subclasses with stable exit codes (see
`bodyfields.cli.errors`).

No-op conditions (no block to update, nothing changed) are *not* errors; they
are reported through `bodyfields.blocks.composer.Composition.outcome`.
"""

from __future__ import annotations


class BodyfieldsError(Exception):
    """Base class for all BodyFields errors."""


class ConfigurationError(BodyfieldsError, ValueError):
    """Mutually exclusive or malformed option combination.

    Raised while freezing a `bodyfields.config.MutableConfig`, i.e. before any
    document is fetched.
    """


class DocumentStoreError(BodyfieldsError):
    """A document store could not serve a request."""


class DocumentNotFoundError(DocumentStoreError):
    """The requested document (issue) does not exist or is not accessible."""


class DocumentWriteError(DocumentStoreError):
    """Persisting an update failed (transport, authentication or validation error)."""
