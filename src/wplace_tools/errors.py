"""Exception types raised by wplace_tools.

All errors derive from :class:`ValueError` so callers can keep a single
``except ValueError`` seam (the web layer maps it to HTTP 422).
"""

from __future__ import annotations


class WplaceToolsError(ValueError):
    """Base class for all user-facing input errors."""


class MalformedInputError(WplaceToolsError):
    """Input could not be parsed (bad URL, missing lat/lng, bad date or count)."""


class DomainViolationError(WplaceToolsError):
    """Input parsed fine but lies outside the domain of the operation."""
