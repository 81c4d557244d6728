"""Exceptions raised by the swear filter."""

from __future__ import annotations


class SwearFilterError(Exception):
    """Base class for every error raised by this package."""


class MalformedTextError(SwearFilterError, ValueError):
    """The message could not be decoded or decomposed as Unicode text."""
