"""Custom exceptions for slideedit."""

from __future__ import annotations


class SlideEditError(Exception):
    """Base exception for all slideedit errors."""

    pass


class TransportError(SlideEditError):
    """Base exception for transport-related errors."""

    pass


class NotFoundError(TransportError):
    """Raised when a presentation is not found (404)."""

    pass


class ValidationError(SlideEditError):
    """Raised when edit input is rejected before anything is sent."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class SlideNotFoundError(SlideEditError):
    """Raised when a slide index or ID does not exist."""

    pass


class ObjectNotFoundError(SlideEditError):
    """Raised when a page element is not in the presentation."""

    def __init__(self, object_id: str, message: str | None = None) -> None:
        self.object_id = object_id
        super().__init__(message or f"Object '{object_id}' not found in presentation")


class NotTextObjectError(SlideEditError):
    """Raised when a text edit targets an element without text."""

    pass


class NotVideoObjectError(SlideEditError):
    """Raised when a video edit targets something that is not a video."""

    pass


class NotImageObjectError(SlideEditError):
    """Raised when an image edit targets something that is not an image."""

    pass
