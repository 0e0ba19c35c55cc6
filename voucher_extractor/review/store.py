"""JSON-file persistence for the review table between sessions."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from voucher_extractor.core.models import InvoiceRecord
from voucher_extractor.reporting.sinks import ensure_output_dir

logger = logging.getLogger(__name__)


class RecordStore:
    """Saves and restores the full record list as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def save(self, records: Iterable[InvoiceRecord]) -> None:
        payload = [record.to_dict() for record in records]
        ensure_output_dir(self.path)
        try:
            self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError:
            logger.exception("Failed to save records to %s", self.path)
            raise

    def load(self) -> List[InvoiceRecord]:
        """Return stored records, or an empty list when nothing usable is stored."""

        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return [InvoiceRecord.from_dict(item) for item in payload]
        except (OSError, ValueError, TypeError):
            logger.exception("Failed to load records from %s", self.path)
            return []

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    def exists(self) -> bool:
        return self.path.exists()
