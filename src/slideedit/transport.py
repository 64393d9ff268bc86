"""Transport layer between the editor and the document service.

Defines the Transport protocol the editor talks to and a file-backed
implementation:
- Transport: fetch a presentation snapshot and submit batchUpdate requests
- LocalFileTransport: reads golden files and records submitted requests
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from slideedit.exceptions import NotFoundError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class PresentationData:
    """Complete presentation data from the document service.

    Attributes:
        presentation_id: The presentation identifier
        data: Full API response (presentation JSON)
    """

    presentation_id: str
    data: dict[str, Any]


class Transport(ABC):
    """Abstract base class for the document service.

    Implementations fetch presentation snapshots and apply batch updates
    against a presentation source (Google API, local files, etc.).
    """

    @abstractmethod
    async def get_presentation(self, presentation_id: str) -> PresentationData:
        """Fetch complete presentation data.

        Args:
            presentation_id: The presentation identifier

        Returns:
            PresentationData with full presentation contents
        """
        ...

    @abstractmethod
    async def batch_update(
        self, presentation_id: str, requests: list[dict[str, Any]]
    ) -> dict[str, Any]:
        """Send batch update requests to the presentation.

        Args:
            presentation_id: The presentation identifier
            requests: List of Google Slides API request objects

        Returns:
            API response from batchUpdate
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        ...


class LocalFileTransport(Transport):
    """Transport that reads from local golden files.

    Expected directory structure:
        golden_dir/
            <presentation_id>/
                presentation.json

    Batch updates are recorded, not applied.
    """

    def __init__(self, golden_dir: Path) -> None:
        """Initialize the transport.

        Args:
            golden_dir: Directory containing golden presentation files
        """
        self._golden_dir = golden_dir
        self._batch_updates: list[dict[str, Any]] = []

    async def get_presentation(self, presentation_id: str) -> PresentationData:
        """Read presentation from local file."""
        path = self._golden_dir / presentation_id / "presentation.json"
        if not path.exists():
            raise NotFoundError(f"Golden file not found: {path}")

        response = json.loads(path.read_text())

        return PresentationData(
            presentation_id=response.get("presentationId", presentation_id),
            data=response,
        )

    async def batch_update(
        self, presentation_id: str, requests: list[dict[str, Any]]
    ) -> dict[str, Any]:
        """Record batch update requests."""
        self._batch_updates.append(
            {"presentation_id": presentation_id, "requests": requests}
        )
        return {"presentationId": presentation_id, "replies": [{}] * len(requests)}

    async def close(self) -> None:
        """No-op for local file transport."""
        pass

    @property
    def batch_updates(self) -> list[dict[str, Any]]:
        """Get recorded batch updates."""
        return self._batch_updates
