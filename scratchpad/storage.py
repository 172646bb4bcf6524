"""Choosing file names for saved canvas images."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_FOLDER = "images/"
DEFAULT_PREFIX = "__image__"


def unique_name(folder: str | os.PathLike[str] = DEFAULT_FOLDER,
                prefix: str = DEFAULT_PREFIX) -> Path:
    """Return an unused PNG path in folder, creating the folder if needed.

    The number starts at the count of visible entries in the folder and
    is increased until the name is free.
    """
    directory = Path(folder)
    directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    count = sum(1 for entry in directory.iterdir() if not entry.name.startswith("."))
    while True:
        candidate = directory / f"{prefix}{count:03d}.png"
        if not candidate.exists():
            return candidate
        count += 1