"""Affine transform composition for moving, resizing and rotating elements.

Google Slides places every page element with a 2D affine matrix:

    [ scaleX  shearX  translateX ]
    [ shearY  scaleY  translateY ]
    [   0       0         1      ]

Edits are expressed in points and degrees; the resulting transform is in EMU
and is applied in ABSOLUTE mode, replacing whatever the server holds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from loguru import logger

from slideedit.units import emu_to_pt, pt_to_emu


@dataclass(frozen=True)
class Position:
    """Top-left position in points."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """Target size in points. Either side may be left unset."""

    width: float | None = None
    height: float | None = None


@dataclass(frozen=True)
class ElementGeometry:
    """Current placement of a page element.

    Width and height are the rendered size in EMU, i.e. already multiplied by
    the current scale.
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    shear_x: float = 0.0
    shear_y: float = 0.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    width_emu: float = 0.0
    height_emu: float = 0.0

    @classmethod
    def from_element(cls, element: dict[str, Any]) -> ElementGeometry:
        """Extract geometry from a pageElement."""
        t = element.get("transform", {})
        size = element.get("size", {})
        return cls(
            scale_x=t.get("scaleX", 1),
            scale_y=t.get("scaleY", 1),
            shear_x=t.get("shearX", 0),
            shear_y=t.get("shearY", 0),
            translate_x=_to_emu(t.get("translateX", 0), t.get("unit")),
            translate_y=_to_emu(t.get("translateY", 0), t.get("unit")),
            width_emu=_dimension_emu(size.get("width")),
            height_emu=_dimension_emu(size.get("height")),
        )

    @property
    def is_rotated(self) -> bool:
        return self.shear_x != 0 or self.shear_y != 0

    @property
    def angle(self) -> float:
        """Current rotation in radians."""
        return math.atan2(self.shear_y, self.scale_x)

    def axis_scales(self) -> tuple[float, float]:
        """Scale along the element's own x and y axes.

        Axis-aligned elements report their raw entries, sign included. Once
        the matrix carries rotation those entries hold ``s * cos(angle)``, so
        the axis scale is the length of each matrix column instead.
        """
        if not self.is_rotated:
            return self.scale_x, self.scale_y
        return (
            math.hypot(self.scale_x, self.shear_y),
            math.hypot(self.scale_y, self.shear_x),
        )


@dataclass(frozen=True)
class GeometryEdit:
    """Requested change. Unset fields leave the current value alone."""

    position: Position | None = None
    size: Size | None = None
    rotation: float | None = None  # degrees
    scale_proportionally: bool = False


@dataclass(frozen=True)
class AffineTransform:
    """Transform to write back, in EMU."""

    scale_x: float = 1.0
    scale_y: float = 1.0
    shear_x: float = 0.0
    shear_y: float = 0.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    unit: str = "EMU"

    def to_api(self) -> dict[str, Any]:
        """Serialize to the API ``AffineTransform`` shape."""
        return {
            "scaleX": self.scale_x,
            "scaleY": self.scale_y,
            "shearX": self.shear_x,
            "shearY": self.shear_y,
            "translateX": self.translate_x,
            "translateY": self.translate_y,
            "unit": self.unit,
        }


def _to_emu(value: float, unit: str | None) -> float:
    if unit == "PT":
        return pt_to_emu(value)
    return value


def _dimension_emu(dimension: dict[str, Any] | None) -> float:
    if not dimension:
        return 0.0
    return _to_emu(dimension.get("magnitude", 0), dimension.get("unit"))


def _unscaled(rendered_emu: float, scale: float, axis: str) -> float:
    """Recover the element's size before scaling along one axis."""
    if scale == 0:
        logger.warning(f"Degenerate transform: {axis} scale is 0, treating it as 1")
        scale = 1.0
    return rendered_emu / scale


def _target_scale(
    target_pt: float | None, rendered_emu: float, scale: float, axis: str
) -> float | None:
    """Scale that renders the element at ``target_pt``, or None to keep it."""
    if target_pt is None or target_pt <= 0:
        return None
    unscaled = _unscaled(rendered_emu, scale, axis)
    if unscaled == 0:
        logger.warning(f"Element has no {axis} size, keeping current scale")
        return None
    return pt_to_emu(target_pt) / unscaled


def _follow(scale: float, old: float, new: float) -> float:
    """Change ``scale`` by the same ratio as ``old`` -> ``new``."""
    if old == 0:
        return new
    return scale * (new / old)


def compose_transform(current: ElementGeometry, edit: GeometryEdit) -> AffineTransform:
    """Build the absolute transform that applies ``edit`` to ``current``.

    Position only touches the translation. Size works on the element's axis
    scales, and whenever the result has to carry a rotation (a new one, or
    the current one of an already rotated element being resized) the matrix
    is rebuilt from those axis scales and the angle. Otherwise scale and
    shear pass through untouched.
    """
    scale_x = current.scale_x
    scale_y = current.scale_y
    shear_x = current.shear_x
    shear_y = current.shear_y
    translate_x = current.translate_x
    translate_y = current.translate_y

    if edit.position is not None:
        translate_x = pt_to_emu(edit.position.x)
        translate_y = pt_to_emu(edit.position.y)

    axis_x, axis_y = current.axis_scales()
    angle: float | None = None

    if edit.size is not None:
        old_x, old_y = axis_x, axis_y
        new_x = _target_scale(edit.size.width, current.width_emu, old_x, "x")
        new_y = _target_scale(edit.size.height, current.height_emu, old_y, "y")

        if new_x is not None:
            axis_x = new_x
        if new_y is not None:
            axis_y = new_y

        if edit.scale_proportionally:
            if new_x is not None and new_y is None:
                axis_y = _follow(old_y, old_x, new_x)
            elif new_y is not None and new_x is None:
                axis_x = _follow(old_x, old_y, new_y)

        scale_x, scale_y = axis_x, axis_y
        if current.is_rotated:
            angle = current.angle

    if edit.rotation is not None:
        angle = math.radians(edit.rotation)

    if angle is not None:
        c = math.cos(angle)
        s = math.sin(angle)
        scale_x, shear_y, shear_x, scale_y = (
            axis_x * c,
            axis_x * s,
            -axis_y * s,
            axis_y * c,
        )

    return AffineTransform(
        scale_x=scale_x,
        scale_y=scale_y,
        shear_x=shear_x,
        shear_y=shear_y,
        translate_x=translate_x,
        translate_y=translate_y,
    )


def rotation_degrees(transform: AffineTransform) -> float:
    """Rotation angle encoded in the transform, in degrees."""
    return math.degrees(math.atan2(transform.shear_y, transform.scale_x))


def rendered_size(current: ElementGeometry, transform: AffineTransform) -> Size:
    """Size in points the element renders at under ``transform``."""
    axis_x, axis_y = current.axis_scales()
    base_w = _unscaled(current.width_emu, abs(axis_x), "x")
    base_h = _unscaled(current.height_emu, abs(axis_y), "y")
    return Size(
        width=emu_to_pt(base_w * math.hypot(transform.scale_x, transform.shear_y)),
        height=emu_to_pt(base_h * math.hypot(transform.scale_y, transform.shear_x)),
    )
