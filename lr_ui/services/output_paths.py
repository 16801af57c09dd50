"""Where obfuscated scripts are written."""

from __future__ import annotations

from pathlib import Path

OUTPUT_SUFFIX = "-obfuscated"
OUTPUT_EXTENSION = ".lua"


def obfuscated_output_path(source: Path, directory: Path | None = None) -> Path:
    """Return ``<stem>-obfuscated.lua`` next to ``source``, or the first free
    ``<stem>-obfuscated-<n>.lua`` when that name is taken.
    """
    target_dir = directory if directory is not None else source.parent
    stem = source.name.split(".")[0] or source.stem
    tries = 0
    while True:
        counter = f"-{tries}" if tries > 0 else ""
        candidate = target_dir / f"{stem}{OUTPUT_SUFFIX}{counter}{OUTPUT_EXTENSION}"
        if not candidate.exists():
            return candidate
        tries += 1
