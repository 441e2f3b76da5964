"""Backend interface shared by all output renderers."""

from __future__ import annotations

from typing import Protocol

from writer4.parser import hir


class Backend(Protocol):
    def render(self, document: hir.Document) -> str:  # pragma: no cover - structural protocol
        """Render a lowered document into the backend's output format."""
