"""
Exception types raised by SchoCo.

Cryptographic rejection is never an exception: ``verify`` and
``verify_chain`` return ``False`` for forged or tampered input.  The
errors below cover input that cannot even be interpreted.
"""

from __future__ import annotations


class SchocoError(Exception):
    """Base class for all SchoCo errors."""


class DecodeError(SchocoError, ValueError):
    """A point, scalar or signature encoding is malformed."""


class MalformedChainError(SchocoError, ValueError):
    """
    Chain components have inconsistent shape.

    Raised when the number of partial signatures is not exactly one less
    than the number of messages, when the chain is empty, or when it
    exceeds the configured maximum length.
    """
