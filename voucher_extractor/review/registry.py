"""Caller-owned registry of original uploads, keyed by file name."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

logger = logging.getLogger(__name__)

SourceHandle = Union[bytes, Path]


class SourceRegistry:
    """Keeps original PDFs reachable so the review surface can reopen them.

    Files are registered when ingested and released when their record is
    deleted or the table is cleared.
    """

    def __init__(self) -> None:
        self._sources: Dict[str, SourceHandle] = {}

    def register(self, file_name: str, handle: SourceHandle) -> None:
        if file_name in self._sources:
            logger.debug("Replacing registered source %s", file_name)
        self._sources[file_name] = handle

    def get(self, file_name: str) -> Optional[SourceHandle]:
        return self._sources.get(file_name)

    def read_bytes(self, file_name: str) -> Optional[bytes]:
        handle = self._sources.get(file_name)
        if isinstance(handle, Path):
            return handle.read_bytes()
        return handle

    def release(self, file_name: str) -> bool:
        return self._sources.pop(file_name, None) is not None

    def clear(self) -> None:
        self._sources.clear()

    def __contains__(self, file_name: object) -> bool:
        return file_name in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sources))
