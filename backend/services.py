"""Service layer between the HTTP routes and the synonym index."""

from __future__ import annotations

import logging

from models import AddSynonymsRequest, SynonymGroupsResponsePayload, SynonymsResponsePayload
from synonym_index import IndexStats, InvalidArgument, SynonymIndex

logger = logging.getLogger(__name__)


class SynonymService:
    """Wraps a SynonymIndex with payload conversion."""

    def __init__(self, index: SynonymIndex | None = None):
        self.index = index or SynonymIndex()

    def add(self, request: AddSynonymsRequest) -> None:
        try:
            self.index.add(*request.words)
        except InvalidArgument as exc:
            logger.info("Rejected synonyms %r: %s", request.words, exc)
            raise
        logger.debug("Added synonyms %r", request.words)

    def lookup(self, word: str) -> SynonymsResponsePayload:
        if not word.strip():
            raise InvalidArgument("String cannot be blank")
        return SynonymsResponsePayload(word=word.lower(), synonyms=sorted(self.index.get(word)))

    def groups(self) -> SynonymGroupsResponsePayload:
        # Sort for stable output; the index itself is unordered.
        groups = sorted(sorted(members) for members in self.index.get_all())
        return SynonymGroupsResponsePayload(groups=groups)

    def clear(self) -> None:
        self.index.clear()

    def stats(self) -> IndexStats:
        return self.index.stats()
