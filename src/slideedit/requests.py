"""Google Slides API batchUpdate request builders.

Each builder returns plain request dicts ready for ``Transport.batch_update``.
Positions and sizes arrive in points; geometry is written in EMU.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from slideedit.paragraphs import TextRange
from slideedit.transform import AffineTransform, Position, Size
from slideedit.units import format_pt, hex_to_rgb, pt_to_emu

APPLY_MODE_ABSOLUTE = "ABSOLUTE"

# User-facing bullet style names to API bullet presets
BULLET_PRESETS: dict[str, str] = {
    "DISC": "BULLET_DISC_CIRCLE_SQUARE",
    "CIRCLE": "BULLET_DISC_CIRCLE_SQUARE",
    "SQUARE": "BULLET_DISC_CIRCLE_SQUARE",
    "DIAMOND": "BULLET_DIAMOND_CIRCLE_SQUARE",
    "ARROW": "BULLET_ARROW_DIAMOND_DISC",
    "STAR": "BULLET_STAR_CIRCLE_SQUARE",
    "CHECKBOX": "BULLET_CHECKBOX",
    # Full preset names are accepted as-is
    "BULLET_DISC_CIRCLE_SQUARE": "BULLET_DISC_CIRCLE_SQUARE",
    "BULLET_DIAMONDX_ARROW3D_SQUARE": "BULLET_DIAMONDX_ARROW3D_SQUARE",
    "BULLET_CHECKBOX": "BULLET_CHECKBOX",
    "BULLET_ARROW_DIAMOND_DISC": "BULLET_ARROW_DIAMOND_DISC",
    "BULLET_STAR_CIRCLE_SQUARE": "BULLET_STAR_CIRCLE_SQUARE",
    "BULLET_ARROW3D_CIRCLE_SQUARE": "BULLET_ARROW3D_CIRCLE_SQUARE",
    "BULLET_LEFTTRIANGLE_DIAMOND_DISC": "BULLET_LEFTTRIANGLE_DIAMOND_DISC",
    "BULLET_DIAMONDX_HOLLOWDIAMOND_SQUARE": "BULLET_DIAMONDX_HOLLOWDIAMOND_SQUARE",
    "BULLET_DIAMOND_CIRCLE_SQUARE": "BULLET_DIAMOND_CIRCLE_SQUARE",
}

# User-facing number style names to API numbered presets
NUMBER_PRESETS: dict[str, str] = {
    "DECIMAL": "NUMBERED_DECIMAL_ALPHA_ROMAN",
    "ALPHA_UPPER": "NUMBERED_UPPERALPHA_ALPHA_ROMAN",
    "ALPHA_LOWER": "NUMBERED_ALPHA_ALPHA_ROMAN",
    "ROMAN_UPPER": "NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL",
    "ROMAN_LOWER": "NUMBERED_ROMAN_UPPERALPHA_DECIMAL",
    "NUMBERED_DECIMAL_ALPHA_ROMAN": "NUMBERED_DECIMAL_ALPHA_ROMAN",
    "NUMBERED_DECIMAL_ALPHA_ROMAN_PARENS": "NUMBERED_DECIMAL_ALPHA_ROMAN_PARENS",
    "NUMBERED_DECIMAL_NESTED": "NUMBERED_DECIMAL_NESTED",
    "NUMBERED_UPPERALPHA_ALPHA_ROMAN": "NUMBERED_UPPERALPHA_ALPHA_ROMAN",
    "NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL": "NUMBERED_UPPERROMAN_UPPERALPHA_DECIMAL",
    "NUMBERED_ZERODECIMAL_ALPHA_ROMAN": "NUMBERED_ZERODECIMAL_ALPHA_ROMAN",
}

ALIGNMENTS = frozenset({"START", "CENTER", "END", "JUSTIFIED"})


@dataclass(frozen=True)
class TextStyle:
    """Optional character styling for new text."""

    font_family: str | None = None
    font_size: float | None = None  # points
    bold: bool = False
    italic: bool = False
    color: str | None = None  # hex, e.g. "#FF0000"


@dataclass(frozen=True)
class ParagraphFormatting:
    """Paragraph style fields to update. Unset fields are left alone."""

    alignment: str | None = None
    line_spacing: float | None = None  # percent, 100 = single
    space_above: float | None = None  # points
    space_below: float | None = None
    indent_first_line: float | None = None
    indent_start: float | None = None
    indent_end: float | None = None

    def is_empty(self) -> bool:
        return all(value is None for value in self.__dict__.values())


@dataclass(frozen=True)
class Crop:
    """Image crop offsets, each a fraction (0-1) of the image side."""

    top: float | None = None
    bottom: float | None = None
    left: float | None = None
    right: float | None = None

    def offsets(self) -> dict[str, Any]:
        """Set offsets keyed by their API field name."""
        values = {
            "topOffset": self.top,
            "bottomOffset": self.bottom,
            "leftOffset": self.left,
            "rightOffset": self.right,
        }
        return {name: value for name, value in values.items() if value is not None}


def _dimension(magnitude: float, unit: str = "PT") -> dict[str, Any]:
    return {"magnitude": magnitude, "unit": unit}


def _rgb_color(hex_color: str) -> dict[str, Any]:
    r, g, b = hex_to_rgb(hex_color)
    return {"opaqueColor": {"rgbColor": {"red": r, "green": g, "blue": b}}}


def update_transform_request(
    object_id: str, transform: AffineTransform
) -> dict[str, Any]:
    """Generate updatePageElementTransform replacing the current transform."""
    return {
        "updatePageElementTransform": {
            "objectId": object_id,
            "applyMode": APPLY_MODE_ABSOLUTE,
            "transform": transform.to_api(),
        }
    }


def text_style_request(
    object_id: str, style: TextStyle, text_range: TextRange | None = None
) -> dict[str, Any] | None:
    """Generate updateTextStyle request, or None if the style sets nothing."""
    api_style: dict[str, Any] = {}
    fields: list[str] = []

    if style.font_family:
        api_style["fontFamily"] = style.font_family
        fields.append("fontFamily")
    if style.font_size and style.font_size > 0:
        api_style["fontSize"] = _dimension(style.font_size)
        fields.append("fontSize")
    if style.bold:
        api_style["bold"] = True
        fields.append("bold")
    if style.italic:
        api_style["italic"] = True
        fields.append("italic")
    if style.color:
        api_style["foregroundColor"] = _rgb_color(style.color)
        fields.append("foregroundColor")

    if not api_style:
        return None

    return {
        "updateTextStyle": {
            "objectId": object_id,
            "textRange": (text_range or TextRange.all()).to_api(),
            "style": api_style,
            "fields": ",".join(fields),
        }
    }


def create_text_box_requests(
    object_id: str,
    slide_id: str,
    text: str,
    position: Position,
    size: Size,
    style: TextStyle | None = None,
) -> list[dict[str, Any]]:
    """Generate createShape + insertText (+ style) for a new text box."""
    requests: list[dict[str, Any]] = [
        {
            "createShape": {
                "objectId": object_id,
                "shapeType": "TEXT_BOX",
                "elementProperties": {
                    "pageObjectId": slide_id,
                    "size": {
                        "width": _dimension(pt_to_emu(size.width or 0), "EMU"),
                        "height": _dimension(pt_to_emu(size.height or 0), "EMU"),
                    },
                    "transform": AffineTransform(
                        translate_x=pt_to_emu(position.x),
                        translate_y=pt_to_emu(position.y),
                    ).to_api(),
                },
            }
        },
        {
            "insertText": {
                "objectId": object_id,
                "insertionIndex": 0,
                "text": text,
            }
        },
    ]

    if style is not None:
        style_request = text_style_request(object_id, style)
        if style_request:
            requests.append(style_request)

    return requests


def update_paragraph_style_request(
    object_id: str, formatting: ParagraphFormatting, text_range: TextRange
) -> tuple[dict[str, Any] | None, list[str]]:
    """Generate updateParagraphStyle request.

    Returns:
        The request (None when nothing is set) and a description of each
        applied field, e.g. ``["alignment=CENTER", "space_above=12pt"]``.
    """
    style: dict[str, Any] = {}
    fields: list[str] = []
    applied: list[str] = []

    if formatting.alignment:
        style["alignment"] = formatting.alignment
        fields.append("alignment")
        applied.append(f"alignment={formatting.alignment}")

    if formatting.line_spacing is not None:
        style["lineSpacing"] = formatting.line_spacing
        fields.append("lineSpacing")
        applied.append(f"line_spacing={format_pt(formatting.line_spacing)}%")

    dimensions = [
        ("spaceAbove", "space_above", formatting.space_above),
        ("spaceBelow", "space_below", formatting.space_below),
        ("indentFirstLine", "indent_first_line", formatting.indent_first_line),
        ("indentStart", "indent_start", formatting.indent_start),
        ("indentEnd", "indent_end", formatting.indent_end),
    ]
    for api_field, name, value in dimensions:
        if value is None:
            continue
        style[api_field] = _dimension(value)
        fields.append(api_field)
        applied.append(f"{name}={format_pt(value)}pt")

    if not style:
        return None, []

    request = {
        "updateParagraphStyle": {
            "objectId": object_id,
            "textRange": text_range.to_api(),
            "style": style,
            "fields": ",".join(fields),
        }
    }
    return request, applied


def create_bullets_request(
    object_id: str, text_range: TextRange, preset: str
) -> dict[str, Any]:
    """Generate createParagraphBullets request."""
    return {
        "createParagraphBullets": {
            "objectId": object_id,
            "textRange": text_range.to_api(),
            "bulletPreset": preset,
        }
    }


def delete_bullets_request(object_id: str, text_range: TextRange) -> dict[str, Any]:
    """Generate deleteParagraphBullets request."""
    return {
        "deleteParagraphBullets": {
            "objectId": object_id,
            "textRange": text_range.to_api(),
        }
    }


def foreground_color_request(
    object_id: str, text_range: TextRange, hex_color: str
) -> dict[str, Any]:
    """Generate updateTextStyle setting only the foreground color.

    Bullet glyphs follow the text style of their paragraph, so this also
    recolors bullets.
    """
    return {
        "updateTextStyle": {
            "objectId": object_id,
            "textRange": text_range.to_api(),
            "style": {"foregroundColor": _rgb_color(hex_color)},
            "fields": "foregroundColor",
        }
    }


def indent_start_request(
    object_id: str, text_range: TextRange, points: float
) -> dict[str, Any]:
    """Generate updateParagraphStyle setting the start indent."""
    return {
        "updateParagraphStyle": {
            "objectId": object_id,
            "textRange": text_range.to_api(),
            "style": {"indentStart": _dimension(points)},
            "fields": "indentStart",
        }
    }


def update_video_properties_request(
    object_id: str,
    *,
    start_time: float | None = None,
    end_time: float | None = None,
    autoplay: bool | None = None,
    mute: bool | None = None,
) -> tuple[dict[str, Any] | None, list[str]]:
    """Generate updateVideoProperties request.

    Times are given in seconds and sent in milliseconds.

    Returns:
        The request (None when nothing is set) and the names of the
        modified properties.
    """
    props: dict[str, Any] = {}
    fields: list[str] = []
    modified: list[str] = []

    if start_time is not None:
        props["start"] = int(start_time * 1000)
        fields.append("start")
        modified.append("start_time")
    if end_time is not None:
        props["end"] = int(end_time * 1000)
        fields.append("end")
        modified.append("end_time")
    if autoplay is not None:
        props["autoPlay"] = autoplay
        fields.append("autoPlay")
        modified.append("autoplay")
    if mute is not None:
        props["mute"] = mute
        fields.append("mute")
        modified.append("mute")

    if not props:
        return None, []

    request = {
        "updateVideoProperties": {
            "objectId": object_id,
            "videoProperties": props,
            "fields": ",".join(fields),
        }
    }
    return request, modified


def update_image_properties_request(
    object_id: str,
    *,
    crop: Crop | None = None,
    brightness: float | None = None,
    contrast: float | None = None,
    transparency: float | None = None,
    recolor: str | None = None,
) -> tuple[dict[str, Any] | None, list[str]]:
    """Generate updateImageProperties request.

    ``recolor`` takes a preset name; "none" (or an empty string) clears the
    current recolor effect by naming the field without a value.

    Returns:
        The request (None when nothing is set) and the names of the
        modified properties.
    """
    props: dict[str, Any] = {}
    fields: list[str] = []
    modified: list[str] = []

    offsets = crop.offsets() if crop else {}
    if offsets:
        props["cropProperties"] = offsets
        fields.extend(f"cropProperties.{name}" for name in offsets)
        modified.append("crop")
    for name, value in (
        ("brightness", brightness),
        ("contrast", contrast),
        ("transparency", transparency),
    ):
        if value is not None:
            props[name] = value
            fields.append(name)
            modified.append(name)
    if recolor is not None:
        preset = recolor.strip().upper()
        if preset and preset != "NONE":
            props["recolor"] = {"name": preset}
        fields.append("recolor")
        modified.append("recolor")

    if not fields:
        return None, []

    request = {
        "updateImageProperties": {
            "objectId": object_id,
            "imageProperties": props,
            "fields": ",".join(fields),
        }
    }
    return request, modified
