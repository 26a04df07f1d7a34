"""Runtime configuration for the lesson catalog."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogConfig:
    """Configuration for catalog loading and link generation.

    Immutable and explicit: nothing is read from the environment.
    ``content_dir`` of ``None`` selects the lessons bundled with the package.
    """

    content_dir: Path | None = None
    base_url: str = "/"
