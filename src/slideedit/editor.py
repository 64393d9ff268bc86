"""SlideEditor - editing operations over a presentation.

Each operation follows the same steps: validate input, fetch the
presentation, locate the target element, resolve geometry or paragraph
ranges, build requests, submit them, and report what was done.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field, replace
from typing import Any

from loguru import logger

from slideedit.config import Settings, get_settings
from slideedit.elements import element_type, find_element, find_slide, shape_text
from slideedit.exceptions import (
    NotImageObjectError,
    NotTextObjectError,
    NotVideoObjectError,
    ObjectNotFoundError,
    ValidationError,
)
from slideedit.logging import audit_batch_update, clear_edit_context, set_edit_context
from slideedit.paragraphs import (
    count_paragraphs,
    current_indent,
    range_for_index,
    range_for_indices,
    text_runs,
)
from slideedit.requests import (
    ALIGNMENTS,
    BULLET_PRESETS,
    NUMBER_PRESETS,
    Crop,
    ParagraphFormatting,
    TextStyle,
    create_bullets_request,
    create_text_box_requests,
    delete_bullets_request,
    foreground_color_request,
    indent_start_request,
    update_image_properties_request,
    update_paragraph_style_request,
    update_transform_request,
    update_video_properties_request,
)
from slideedit.scope import index_scope, scope_label
from slideedit.transform import (
    ElementGeometry,
    GeometryEdit,
    Position,
    Size,
    compose_transform,
    rendered_size,
    rotation_degrees,
)
from slideedit.transport import Transport
from slideedit.units import emu_to_pt, format_pt, hex_to_rgb

LIST_ACTIONS = ("modify", "remove", "increase_indent", "decrease_indent")


@dataclass
class _Result:
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class AddTextBoxResult(_Result):
    object_id: str
    slide_id: str


@dataclass
class TransformResult(_Result):
    object_id: str
    position: dict[str, float]
    size: dict[str, float]
    rotation: float


@dataclass
class ModifyVideoResult(_Result):
    object_id: str
    modified_properties: list[str] = field(default_factory=list)


@dataclass
class ModifyImageResult(_Result):
    object_id: str
    modified_properties: list[str] = field(default_factory=list)


@dataclass
class FormatParagraphResult(_Result):
    object_id: str
    paragraph_scope: str
    applied_formatting: list[str] = field(default_factory=list)


@dataclass
class BulletListResult(_Result):
    object_id: str
    bullet_preset: str
    paragraph_scope: str
    bullet_color: str | None = None


@dataclass
class NumberedListResult(_Result):
    object_id: str
    number_preset: str
    paragraph_scope: str
    start_number: int = 1


@dataclass
class ModifyListResult(_Result):
    object_id: str
    action: str
    paragraph_scope: str
    result: str


@dataclass(frozen=True)
class ListProperties:
    """Properties for the ``modify`` list action."""

    bullet_style: str | None = None
    number_style: str | None = None
    color: str | None = None


def _require(value: str, name: str) -> None:
    if not value:
        raise ValidationError(f"{name} is required", field=name)


def _check_color(color: str | None, name: str) -> None:
    if color is None:
        return
    try:
        hex_to_rgb(color)
    except ValueError as e:
        raise ValidationError(f"'{color}' is not a valid hex color", field=name) from e


def _check_indices(indices: Sequence[int] | None) -> None:
    for idx in indices or ():
        if idx < 0:
            raise ValidationError(
                "paragraph indices cannot be negative", field="paragraph_indices"
            )


def _check_size(size: Size | None) -> None:
    if size is None:
        return
    for name, value in (("width", size.width), ("height", size.height)):
        if value is not None and value < 0:
            raise ValidationError(f"size {name} cannot be negative", field="size")
    if not (size.width or size.height):
        raise ValidationError("size needs a positive width or height", field="size")


def _check_fraction(value: float | None, name: str, low: float = 0.0) -> None:
    if value is not None and not low <= value <= 1:
        raise ValidationError(f"{name} must be between {low:g} and 1", field=name)


def _lookup_preset(style: str, presets: dict[str, str], name: str) -> str:
    preset = presets.get(style.upper())
    if preset is None:
        short_names = ", ".join(k for k in presets if k != presets[k])
        raise ValidationError(
            f"'{style}' is not a valid {name}; use {short_names}, or a full preset name",
            field=name,
        )
    return preset


class SlideEditor:
    """Applies element and paragraph edits to presentations.

    Example:
        >>> from slideedit.transport import LocalFileTransport
        >>> editor = SlideEditor(LocalFileTransport(Path("./golden")))
        >>> await editor.transform_object("deck", "shape1", rotation=90)
    """

    def __init__(self, transport: Transport, settings: Settings | None = None) -> None:
        """Initialize the editor.

        Args:
            transport: Document service used to fetch and update presentations
            settings: Editor settings; defaults to environment configuration
        """
        self._transport = transport
        self._settings = settings or get_settings()

    async def _fetch(self, presentation_id: str) -> dict[str, Any]:
        presentation = await self._transport.get_presentation(presentation_id)
        return presentation.data

    async def _submit(self, presentation_id: str, requests: list[dict[str, Any]]) -> None:
        audit_batch_update(presentation_id, requests)
        await self._transport.batch_update(presentation_id, requests)

    async def _element(self, presentation_id: str, object_id: str) -> dict[str, Any]:
        data = await self._fetch(presentation_id)
        element = find_element(data, object_id)
        if element is None:
            raise ObjectNotFoundError(object_id)
        return element

    async def _text_element(
        self, presentation_id: str, object_id: str
    ) -> dict[str, Any]:
        element = await self._element(presentation_id, object_id)
        text = shape_text(element)
        if text is None:
            if "table" in element:
                raise NotTextObjectError(
                    f"Object '{object_id}' is a table; edit its cells individually"
                )
            raise NotTextObjectError(f"Object '{object_id}' does not contain text")
        return text

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    async def add_text_box(
        self,
        presentation_id: str,
        text: str,
        *,
        size: Size,
        position: Position | None = None,
        slide_index: int | None = None,
        slide_id: str | None = None,
        style: TextStyle | None = None,
    ) -> AddTextBoxResult:
        """Add a text box to a slide.

        Args:
            presentation_id: The presentation to edit
            text: Text to place in the box
            size: Box size in points; both sides must be positive
            position: Top-left corner in points (default 0, 0)
            slide_index: 1-based slide position
            slide_id: Slide object ID, alternative to slide_index
            style: Optional text styling
        """
        _require(presentation_id, "presentation_id")
        _require(text, "text")
        if slide_index is None and not slide_id:
            raise ValidationError("slide_index or slide_id is required", field="slide_index")
        if not size.width or size.width <= 0 or not size.height or size.height <= 0:
            raise ValidationError("size width and height must be positive", field="size")
        if style is not None:
            _check_color(style.color, "color")

        set_edit_context(presentation_id)
        try:
            logger.info(f"Adding text box ({len(text)} chars)")
            data = await self._fetch(presentation_id)
            target_slide = find_slide(data, slide_index=slide_index, slide_id=slide_id)

            object_id = f"textbox_{time.time_ns()}"
            requests = create_text_box_requests(
                object_id,
                target_slide,
                text,
                position or Position(0, 0),
                size,
                style,
            )
            await self._submit(presentation_id, requests)

            logger.info(f"Text box {object_id} added to slide {target_slide}")
            return AddTextBoxResult(object_id=object_id, slide_id=target_slide)
        finally:
            clear_edit_context()

    async def transform_object(
        self,
        presentation_id: str,
        object_id: str,
        *,
        position: Position | None = None,
        size: Size | None = None,
        rotation: float | None = None,
        scale_proportionally: bool = True,
    ) -> TransformResult:
        """Move, resize and/or rotate a page element.

        Args:
            presentation_id: The presentation to edit
            object_id: Element to transform
            position: New top-left position in points
            size: New size in points; a missing side keeps its scale
            rotation: New rotation in degrees
            scale_proportionally: When only one side is given, scale the
                other side by the same ratio

        Returns:
            The resulting position, size (points) and rotation (degrees)
        """
        _require(presentation_id, "presentation_id")
        _require(object_id, "object_id")
        if position is None and size is None and rotation is None:
            raise ValidationError("position, size or rotation is required")
        _check_size(size)

        set_edit_context(presentation_id, object_id)
        try:
            logger.info("Transforming object")
            element = await self._element(presentation_id, object_id)
            current = ElementGeometry.from_element(element)

            edit = GeometryEdit(
                position=position,
                size=size,
                rotation=rotation,
                scale_proportionally=scale_proportionally,
            )
            transform = compose_transform(current, edit)
            await self._submit(
                presentation_id, [update_transform_request(object_id, transform)]
            )

            new_size = rendered_size(current, transform)
            result = TransformResult(
                object_id=object_id,
                position={
                    "x": emu_to_pt(transform.translate_x),
                    "y": emu_to_pt(transform.translate_y),
                },
                size={"width": new_size.width or 0.0, "height": new_size.height or 0.0},
                rotation=rotation_degrees(transform),
            )
            logger.info("Object transformed")
            return result
        finally:
            clear_edit_context()

    async def modify_video(
        self,
        presentation_id: str,
        object_id: str,
        *,
        position: Position | None = None,
        size: Size | None = None,
        start_time: float | None = None,
        end_time: float | None = None,
        autoplay: bool | None = None,
        mute: bool | None = None,
    ) -> ModifyVideoResult:
        """Reposition, resize or change playback of a video.

        Times are in seconds.
        """
        _require(presentation_id, "presentation_id")
        _require(object_id, "object_id")
        if all(
            v is None for v in (position, size, start_time, end_time, autoplay, mute)
        ):
            raise ValidationError("no video properties to modify")
        _check_size(size)
        if start_time is not None and start_time < 0:
            raise ValidationError("start_time cannot be negative", field="start_time")
        if end_time is not None and end_time < 0:
            raise ValidationError("end_time cannot be negative", field="end_time")
        if start_time is not None and end_time is not None and end_time <= start_time:
            raise ValidationError("end_time must be after start_time", field="end_time")

        set_edit_context(presentation_id, object_id)
        try:
            logger.info("Modifying video")
            element = await self._element(presentation_id, object_id)
            if "video" not in element:
                raise NotVideoObjectError(
                    f"Object '{object_id}' is not a video (type: {element_type(element)})"
                )

            requests: list[dict[str, Any]] = []
            modified: list[str] = []

            if position is not None or size is not None:
                edit = GeometryEdit(position=position, size=size)
                transform = compose_transform(ElementGeometry.from_element(element), edit)
                requests.append(update_transform_request(object_id, transform))
                if position is not None:
                    modified.append("position")
                if size is not None:
                    modified.append("size")

            props_request, props_modified = update_video_properties_request(
                object_id,
                start_time=start_time,
                end_time=end_time,
                autoplay=autoplay,
                mute=mute,
            )
            if props_request:
                requests.append(props_request)
                modified.extend(props_modified)

            await self._submit(presentation_id, requests)
            logger.info(f"Video modified: {', '.join(modified)}")
            return ModifyVideoResult(object_id=object_id, modified_properties=modified)
        finally:
            clear_edit_context()

    async def modify_image(
        self,
        presentation_id: str,
        object_id: str,
        *,
        position: Position | None = None,
        size: Size | None = None,
        crop: Crop | None = None,
        brightness: float | None = None,
        contrast: float | None = None,
        transparency: float | None = None,
        recolor: str | None = None,
    ) -> ModifyImageResult:
        """Reposition, resize, crop or adjust an image.

        Args:
            position: New top-left position in points, not negative
            size: New size in points; each given side scales its own axis
            crop: Offsets as fractions (0-1) of the image
            brightness: -1 to 1
            contrast: -1 to 1
            transparency: 0 to 1
            recolor: Recolor preset name, or "none" to remove recoloring
        """
        _require(presentation_id, "presentation_id")
        _require(object_id, "object_id")
        if all(
            v is None
            for v in (position, size, crop, brightness, contrast, transparency, recolor)
        ):
            raise ValidationError("no image properties to modify")
        if position is not None and (position.x < 0 or position.y < 0):
            raise ValidationError("image position cannot be negative", field="position")
        _check_size(size)
        if crop is not None:
            for side in ("top", "bottom", "left", "right"):
                _check_fraction(getattr(crop, side), f"crop {side}")
        _check_fraction(brightness, "brightness", low=-1.0)
        _check_fraction(contrast, "contrast", low=-1.0)
        _check_fraction(transparency, "transparency")

        set_edit_context(presentation_id, object_id)
        try:
            logger.info("Modifying image")
            element = await self._element(presentation_id, object_id)
            if "image" not in element:
                raise NotImageObjectError(
                    f"Object '{object_id}' is not an image (type: {element_type(element)})"
                )

            requests: list[dict[str, Any]] = []
            modified: list[str] = []

            if position is not None or size is not None:
                edit = GeometryEdit(position=position, size=size)
                transform = compose_transform(ElementGeometry.from_element(element), edit)
                requests.append(update_transform_request(object_id, transform))
                if position is not None:
                    modified.append("position")
                if size is not None:
                    modified.append("size")

            props_request, props_modified = update_image_properties_request(
                object_id,
                crop=crop,
                brightness=brightness,
                contrast=contrast,
                transparency=transparency,
                recolor=recolor,
            )
            if props_request:
                requests.append(props_request)
                modified.extend(props_modified)

            if not requests:
                raise ValidationError("no image properties to modify")

            await self._submit(presentation_id, requests)
            logger.info(f"Image modified: {', '.join(modified)}")
            return ModifyImageResult(object_id=object_id, modified_properties=modified)
        finally:
            clear_edit_context()

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    async def format_paragraph(
        self,
        presentation_id: str,
        object_id: str,
        formatting: ParagraphFormatting,
        *,
        paragraph_index: int | None = None,
    ) -> FormatParagraphResult:
        """Apply paragraph formatting to one paragraph or the whole shape."""
        _require(presentation_id, "presentation_id")
        _require(object_id, "object_id")
        if formatting.is_empty():
            raise ValidationError("no formatting provided", field="formatting")
        if formatting.alignment:
            alignment = formatting.alignment.upper()
            if alignment not in ALIGNMENTS:
                raise ValidationError(
                    "alignment must be START, CENTER, END, or JUSTIFIED",
                    field="alignment",
                )
            formatting = replace(formatting, alignment=alignment)
        if formatting.line_spacing is not None and formatting.line_spacing <= 0:
            raise ValidationError("line_spacing must be positive", field="line_spacing")
        if paragraph_index is not None and paragraph_index < 0:
            raise ValidationError(
                "paragraph_index cannot be negative", field="paragraph_index"
            )

        set_edit_context(presentation_id, object_id)
        try:
            logger.info("Formatting paragraph")
            text = await self._text_element(presentation_id, object_id)
            runs = text_runs(text)

            if paragraph_index is not None:
                total = count_paragraphs(runs)
                if paragraph_index >= total:
                    raise ValidationError(
                        f"paragraph index {paragraph_index} is out of range "
                        f"(object has {total} paragraphs)",
                        field="paragraph_index",
                    )

            text_range = range_for_index(runs, paragraph_index)
            request, applied = update_paragraph_style_request(
                object_id, formatting, text_range
            )
            if request is None:
                raise ValidationError("no formatting provided", field="formatting")
            await self._submit(presentation_id, [request])

            logger.info(f"Applied {len(applied)} paragraph style field(s)")
            return FormatParagraphResult(
                object_id=object_id,
                paragraph_scope=index_scope(paragraph_index),
                applied_formatting=applied,
            )
        finally:
            clear_edit_context()

    async def _list_target(
        self,
        presentation_id: str,
        object_id: str,
        paragraph_indices: Sequence[int] | None,
    ) -> dict[str, Any]:
        """Fetch the text of a list target and check the indices against it."""
        text = await self._text_element(presentation_id, object_id)
        if paragraph_indices:
            total = count_paragraphs(text_runs(text))
            for idx in paragraph_indices:
                if idx >= total:
                    raise ValidationError(
                        f"paragraph index {idx} is out of range "
                        f"(object has {total} paragraphs)",
                        field="paragraph_indices",
                    )
        return text

    async def create_bullet_list(
        self,
        presentation_id: str,
        object_id: str,
        bullet_style: str,
        *,
        paragraph_indices: Sequence[int] | None = None,
        bullet_color: str | None = None,
    ) -> BulletListResult:
        """Turn paragraphs into a bulleted list."""
        _require(presentation_id, "presentation_id")
        _require(object_id, "object_id")
        _require(bullet_style, "bullet_style")
        preset = _lookup_preset(bullet_style, BULLET_PRESETS, "bullet_style")
        _check_indices(paragraph_indices)
        _check_color(bullet_color, "bullet_color")

        set_edit_context(presentation_id, object_id)
        try:
            logger.info(f"Creating bullet list with {preset}")
            text = await self._list_target(presentation_id, object_id, paragraph_indices)
            text_range = range_for_indices(text_runs(text), paragraph_indices)

            requests = [create_bullets_request(object_id, text_range, preset)]
            if bullet_color:
                requests.append(foreground_color_request(object_id, text_range, bullet_color))
            await self._submit(presentation_id, requests)

            logger.info("Bullet list created")
            return BulletListResult(
                object_id=object_id,
                bullet_preset=preset,
                paragraph_scope=scope_label(text_range, list(paragraph_indices or [])),
                bullet_color=bullet_color,
            )
        finally:
            clear_edit_context()

    async def create_numbered_list(
        self,
        presentation_id: str,
        object_id: str,
        number_style: str,
        *,
        paragraph_indices: Sequence[int] | None = None,
        start_number: int = 1,
    ) -> NumberedListResult:
        """Turn paragraphs into a numbered list.

        The API has no start number field; ``start_number`` is validated
        and reported only.
        """
        _require(presentation_id, "presentation_id")
        _require(object_id, "object_id")
        _require(number_style, "number_style")
        preset = _lookup_preset(number_style, NUMBER_PRESETS, "number_style")
        _check_indices(paragraph_indices)
        if start_number < 1:
            raise ValidationError("start_number must be at least 1", field="start_number")

        set_edit_context(presentation_id, object_id)
        try:
            logger.info(f"Creating numbered list with {preset}")
            text = await self._list_target(presentation_id, object_id, paragraph_indices)
            text_range = range_for_indices(text_runs(text), paragraph_indices)

            await self._submit(
                presentation_id, [create_bullets_request(object_id, text_range, preset)]
            )

            logger.info("Numbered list created")
            return NumberedListResult(
                object_id=object_id,
                number_preset=preset,
                paragraph_scope=scope_label(text_range, list(paragraph_indices or [])),
                start_number=start_number,
            )
        finally:
            clear_edit_context()

    async def modify_list(
        self,
        presentation_id: str,
        object_id: str,
        action: str,
        *,
        paragraph_indices: Sequence[int] | None = None,
        properties: ListProperties | None = None,
    ) -> ModifyListResult:
        """Restyle, remove, or re-indent list paragraphs.

        Args:
            action: One of modify, remove, increase_indent, decrease_indent
            properties: Required for ``modify``
        """
        _require(presentation_id, "presentation_id")
        _require(object_id, "object_id")
        action = action.lower()
        if action not in LIST_ACTIONS:
            raise ValidationError(
                "action must be 'modify', 'remove', 'increase_indent', or 'decrease_indent'",
                field="action",
            )
        if action == "modify":
            if properties is None or not (
                properties.bullet_style or properties.number_style or properties.color
            ):
                raise ValidationError(
                    "at least one of bullet_style, number_style or color is required "
                    "for 'modify'",
                    field="properties",
                )
            if properties.bullet_style:
                _lookup_preset(properties.bullet_style, BULLET_PRESETS, "bullet_style")
            if properties.number_style:
                _lookup_preset(properties.number_style, NUMBER_PRESETS, "number_style")
            _check_color(properties.color, "color")
        _check_indices(paragraph_indices)

        set_edit_context(presentation_id, object_id)
        try:
            logger.info(f"Modifying list: {action}")
            text = await self._list_target(presentation_id, object_id, paragraph_indices)
            text_range = range_for_indices(text_runs(text), paragraph_indices)

            requests: list[dict[str, Any]]
            if action == "modify":
                properties = properties or ListProperties()
                requests, descriptions = [], []
                if properties.bullet_style:
                    preset = BULLET_PRESETS[properties.bullet_style.upper()]
                    requests.append(create_bullets_request(object_id, text_range, preset))
                    descriptions.append(f"bullet_style={preset}")
                if properties.number_style:
                    preset = NUMBER_PRESETS[properties.number_style.upper()]
                    requests.append(create_bullets_request(object_id, text_range, preset))
                    descriptions.append(f"number_style={preset}")
                if properties.color:
                    requests.append(
                        foreground_color_request(object_id, text_range, properties.color)
                    )
                    descriptions.append(f"color={properties.color}")
                summary = "Modified: " + ", ".join(descriptions)
            elif action == "remove":
                requests = [delete_bullets_request(object_id, text_range)]
                summary = "Removed list formatting (converted to plain text)"
            else:
                step = self._settings.indent_increment_pt
                indent = current_indent(text)
                if action == "increase_indent":
                    indent += step
                    summary = f"Increased indentation to {format_pt(indent)} points"
                else:
                    indent = max(indent - step, 0.0)
                    summary = f"Decreased indentation to {format_pt(indent)} points"
                requests = [indent_start_request(object_id, text_range, indent)]

            await self._submit(presentation_id, requests)

            logger.info(summary)
            return ModifyListResult(
                object_id=object_id,
                action=action,
                paragraph_scope=scope_label(text_range, list(paragraph_indices or [])),
                result=summary,
            )
        finally:
            clear_edit_context()
