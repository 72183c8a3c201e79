from __future__ import annotations


class InvoiceStudioError(Exception):
    """Base class for errors surfaced to the user."""


class ValidationError(InvoiceStudioError):
    """Invoice input rejected before any computation runs."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class RenderError(InvoiceStudioError):
    """Document composition or PDF serialization failed."""


class LogoError(RenderError):
    """The business logo could not be decoded as an image."""


class ArchiveError(InvoiceStudioError):
    """Archived invoice record is missing or unreadable."""
