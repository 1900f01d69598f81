"""
Booked Seats Store backed by a local JSON file

The file holds one JSON object mapping storage keys to their values. Writes
go to a sibling temp file first and are moved into place, so a crash never
leaves a half-written document behind.
"""

import os
from pathlib import Path
from typing import Dict, Optional

import orjson

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_booked_seats_store import IBookedSeatsStore


class FileBookedSeatsStore(IBookedSeatsStore):
    def __init__(self, *, path: str | Path) -> None:
        self.path = Path(path)

    @Logger.io
    def load(self, key: str) -> Optional[str]:
        return self._read_document().get(key)

    @Logger.io
    def save(self, key: str, value: str) -> None:
        document = self._read_document()
        document[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f'{self.path.name}.tmp')
        tmp_path.write_bytes(orjson.dumps(document, option=orjson.OPT_INDENT_2))
        os.replace(tmp_path, self.path)

    def _read_document(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            document = orjson.loads(self.path.read_bytes())
        except orjson.JSONDecodeError:
            Logger.base.warning(f'⚠️ [FILE-STORE] {self.path} is not valid JSON, ignoring it')
            return {}
        if not isinstance(document, dict):
            Logger.base.warning(f'⚠️ [FILE-STORE] {self.path} is not an object, ignoring it')
            return {}
        return {k: v for k, v in document.items() if isinstance(v, str)}
