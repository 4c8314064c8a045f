from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a raw bridge settings record does not validate."""
