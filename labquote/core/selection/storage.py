"""Durable key-value slots backing the selection store."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from .codec import CorruptSelectionError

logger = logging.getLogger(__name__)

_SLOT_NAME_RE = re.compile(r"[A-Za-z0-9_.-]+")


class SlotStorage:
    """Named string slots that outlive a single process."""

    def get(self, slot: str) -> str | None:
        raise NotImplementedError

    def set(self, slot: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, slot: str) -> None:
        raise NotImplementedError


class MemoryStorage(SlotStorage):
    def __init__(self, initial: dict[str, str] | None = None):
        self.slots: dict[str, str] = dict(initial or {})

    def get(self, slot: str) -> str | None:
        return self.slots.get(slot)

    def set(self, slot: str, value: str) -> None:
        self.slots[slot] = value

    def delete(self, slot: str) -> None:
        self.slots.pop(slot, None)


class FileStorage(SlotStorage):
    """One ``<slot>.json`` file per slot inside ``directory``.

    Writes land in a temporary file that is renamed over the slot file, so a
    concurrent reader sees either the old payload or the new one.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory).expanduser()

    def _path(self, slot: str) -> Path:
        if not _SLOT_NAME_RE.fullmatch(slot):
            raise ValueError(f"Invalid slot name: {slot!r}")
        return self.directory / f"{slot}.json"

    def get(self, slot: str) -> str | None:
        path = self._path(slot)
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptSelectionError(f"Slot {slot} is not valid UTF-8 text") from exc

    def set(self, slot: str, value: str) -> None:
        path = self._path(slot)
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{slot}.", suffix=".tmp", dir=self.directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote slot %s (%d bytes) to %s", slot, len(value), path)

    def delete(self, slot: str) -> None:
        self._path(slot).unlink(missing_ok=True)


__all__ = ["FileStorage", "MemoryStorage", "SlotStorage"]
