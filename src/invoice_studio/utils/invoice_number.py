from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Callable, Protocol

from invoice_studio.core.errors import ArchiveError

log = logging.getLogger(__name__)


class SequenceGenerator(Protocol):
    def next(self) -> int: ...


class CounterSequence:
    """In-memory counter; handy for tests and previews."""

    def __init__(self, start: int = 0):
        self._value = start

    def next(self) -> int:
        self._value += 1
        return self._value


class FileSequence:
    """
    Counter persisted as JSON so numbering survives restarts.

    `floor` reports the highest number already in use (normally the archive).
    The counter never hands out a value at or below it, so a lost or corrupt
    counter file resumes after the last issued invoice. Without a floor a
    corrupt file is an error.
    """

    def __init__(self, path: Path, floor: Callable[[], int] | None = None):
        self.path = path
        self._floor = floor

    def _stored(self) -> int:
        if not self.path.exists():
            return 0
        try:
            return int(json.loads(self.path.read_text(encoding="utf-8")).get("counter", 0))
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            if self._floor is None:
                raise ArchiveError(f"Invoice counter {self.path} is unreadable") from exc
            log.warning("Invoice counter %s unreadable, resuming from the archive: %s", self.path, exc)
            return 0

    def current(self) -> int:
        stored = self._stored()
        if self._floor is None:
            return stored
        return max(stored, self._floor())

    def next(self) -> int:
        value = self.current() + 1
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"counter": value}), encoding="utf-8")
        return value


def generate_invoice_id(sequence: SequenceGenerator, today: date | None = None) -> str:
    """
    Invoice number in the form INV-YYYYMMDD-NNNN.
    The counter keeps growing across days; only the date prefix changes.
    """
    day = today or date.today()
    return f"INV-{day.strftime('%Y%m%d')}-{sequence.next():04d}"
