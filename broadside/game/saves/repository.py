"""Whole-file persistence for the saved session snapshot."""

from __future__ import annotations

import os
from pathlib import Path


class SaveRepository:
    """Single-slot binary file repository with atomic replacement."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def save_bytes(self, data: bytes) -> None:
        """Write the snapshot; the previous file survives any failure."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            with temp_path.open("wb") as handle:
                written = handle.write(data)
                if written != len(data):
                    raise OSError(f"Short write: {written} of {len(data)} bytes.")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_path, self._path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

    def load_bytes(self) -> bytes:
        """Read the whole snapshot file."""
        expected = self._path.stat().st_size
        with self._path.open("rb") as handle:
            data = handle.read()
        if len(data) != expected:
            raise OSError(f"Short read: {len(data)} of {expected} bytes.")
        return data

    def delete(self) -> None:
        self._path.unlink(missing_ok=True)
