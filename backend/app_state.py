"""Backend application state for the synonym services."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from config import Settings
from services import SynonymService
from synonym_index import SynonymIndex


@dataclass
class AppServices:
    settings: Settings
    index: SynonymIndex
    synonyms: SynonymService


class SynonymAppState:
    """Holds the active settings and the index-backed services."""

    def __init__(self, settings: Optional[Settings] = None):
        self._lock = threading.RLock()
        self._services: Optional[AppServices] = None
        self._load(settings or Settings.from_env())

    def current(self) -> AppServices:
        with self._lock:
            assert self._services is not None
            return self._services

    def reset(self) -> AppServices:
        """Swap in a brand-new, empty index while keeping the settings."""
        with self._lock:
            assert self._services is not None
            self._load(self._services.settings)
            return self._services

    def _load(self, settings: Settings) -> None:
        index = SynonymIndex()
        self._services = AppServices(
            settings=settings,
            index=index,
            synonyms=SynonymService(index=index),
        )
