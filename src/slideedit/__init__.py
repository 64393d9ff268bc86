"""slideedit - Move, resize, rotate and format elements in Google Slides."""

from slideedit.editor import ListProperties, SlideEditor
from slideedit.exceptions import (
    NotFoundError,
    NotImageObjectError,
    NotTextObjectError,
    NotVideoObjectError,
    ObjectNotFoundError,
    SlideEditError,
    SlideNotFoundError,
    TransportError,
    ValidationError,
)
from slideedit.paragraphs import TextRange, TextRun
from slideedit.requests import Crop, ParagraphFormatting, TextStyle
from slideedit.transform import (
    AffineTransform,
    ElementGeometry,
    GeometryEdit,
    Position,
    Size,
    compose_transform,
)
from slideedit.transport import LocalFileTransport, PresentationData, Transport

__all__ = [
    "AffineTransform",
    "Crop",
    "ElementGeometry",
    "GeometryEdit",
    "ListProperties",
    "LocalFileTransport",
    "NotFoundError",
    "NotImageObjectError",
    "NotTextObjectError",
    "NotVideoObjectError",
    "ObjectNotFoundError",
    "ParagraphFormatting",
    "Position",
    "PresentationData",
    "Size",
    "SlideEditError",
    "SlideEditor",
    "SlideNotFoundError",
    "TextRange",
    "TextRun",
    "TextStyle",
    "Transport",
    "TransportError",
    "ValidationError",
    "compose_transform",
]

__version__ = "0.1.0"
