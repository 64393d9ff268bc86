"""Logging configuration using loguru.

Records carry the presentation and object being edited. Applications call
``setup_logging`` to install a handler; importing the package installs none.
"""

import json
import sys
from contextvars import ContextVar
from typing import Any

from loguru import logger

from slideedit.config import get_settings

# Context variables for edit-scoped data
presentation_id_ctx: ContextVar[str | None] = ContextVar("presentation_id", default=None)
object_id_ctx: ContextVar[str | None] = ContextVar("object_id", default=None)

# Map loguru levels to Cloud Logging severity levels
LEVEL_TO_SEVERITY = {
    "TRACE": "DEBUG",
    "SUCCESS": "INFO",
}


def _edit_context() -> dict[str, str | None]:
    context = {
        "presentation_id": presentation_id_ctx.get(),
        "object_id": object_id_ctx.get(),
    }
    return {key: value for key, value in context.items() if value}


def _json_formatter(record: dict[str, Any]) -> str:
    """Format a record as one JSON line.

    loguru treats the returned string as a format template, so the JSON is
    stashed in ``extra`` and referenced from the template.
    """
    level = record["level"].name
    entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "severity": LEVEL_TO_SEVERITY.get(level, level),
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        **_edit_context(),
    }
    for key, value in record["extra"].items():
        if key != "serialized":
            entry.setdefault(key, value)

    record["extra"]["serialized"] = json.dumps(entry, default=str)
    return "{extra[serialized]}\n"


def _dev_formatter(_record: dict[str, Any]) -> str:
    """Format a record for development (human-readable)."""
    context = _edit_context()
    prefix = ""
    if context:
        labels = {"presentation_id": "pres", "object_id": "obj"}
        parts = " ".join(f"{labels[key]}={value}" for key, value in context.items())
        prefix = "[" + parts.replace("{", "{{").replace("}", "}}") + "] "

    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        + prefix
        + "<level>{message}</level>\n"
        "{exception}"
    )


def setup_logging(json_logs: bool | None = None, log_level: str | None = None) -> None:
    """Configure loguru for the application.

    Args:
        json_logs: If True, output JSON lines. Defaults to the
            ``SLIDEEDIT_JSON_LOGS`` setting.
        log_level: Minimum log level to output. Defaults to the
            ``SLIDEEDIT_LOG_LEVEL`` setting.
    """
    settings = get_settings()
    if json_logs is None:
        json_logs = settings.json_logs
    if log_level is None:
        log_level = settings.log_level

    logger.remove()
    if json_logs:
        logger.add(sys.stderr, format=_json_formatter, level=log_level)
    else:
        logger.add(sys.stderr, format=_dev_formatter, level=log_level, colorize=True)


def set_edit_context(presentation_id: str | None = None, object_id: str | None = None) -> None:
    """Set context for the current edit."""
    if presentation_id:
        presentation_id_ctx.set(presentation_id)
    if object_id:
        object_id_ctx.set(object_id)


def clear_edit_context() -> None:
    """Clear edit context after the edit completes."""
    presentation_id_ctx.set(None)
    object_id_ctx.set(None)


def audit_batch_update(presentation_id: str, requests: list[dict[str, Any]]) -> None:
    """Log a batch update about to be submitted."""
    kinds = [next(iter(request), "unknown") for request in requests]
    logger.bind(
        audit_event="batch_update",
        presentation_id=presentation_id,
        request_count=len(requests),
        request_kinds=kinds,
    ).info(f"Submitting {len(requests)} request(s)")
