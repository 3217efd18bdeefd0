"""In-memory synonym index.

Every known word carries the id of its synonym group, and each group id maps to
the set of words sharing it. Linking two words from different groups dissolves
both groups into a freshly numbered one. The two maps are only ever mutated
together under the exclusive side of a reader/writer lock; reads take the
shared side and hand back copies.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when words passed to the index violate its input contract."""


@dataclass(frozen=True)
class IndexStats:
    words: int
    groups: int


def normalize_word(word: object) -> Optional[str]:
    """Return the canonical (lowercase) form of ``word``, or None if blank."""
    if not isinstance(word, str) or not word.strip():
        return None
    return word.lower()


class SynonymIndex:
    """Thread-safe partition of words into synonym groups."""

    def __init__(self):
        self._lock = ReadWriteLock()
        self._word_to_group: Dict[str, int] = {}
        self._group_to_words: Dict[int, Set[str]] = {}
        self._sequence = itertools.count(1)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add(self, *words: str) -> None:
        """Make all ``words`` synonyms of each other.

        Two words are linked directly. Longer argument lists are linked as a
        chain of consecutive pairs, applied as a single atomic update.
        """
        if len(words) == 2:
            self.add_pair(words[0], words[1])
            return
        if len(words) < 2:
            raise InvalidArgument("At least two words must be passed")

        canonical = self._canonical_all(words)
        if len(set(canonical)) != len(canonical):
            raise InvalidArgument("Words contain duplicates")

        with self._lock.write_locked():
            for first, second in zip(canonical, canonical[1:]):
                self._link(first, second)

    def add_pair(self, word1: str, word2: str) -> None:
        """Make ``word1`` and ``word2`` synonyms, merging their groups if needed."""
        first, second = self._canonical_all((word1, word2))
        if first == second:
            raise InvalidArgument("A word cannot be a synonym of itself")

        with self._lock.write_locked():
            self._link(first, second)

    def clear(self) -> None:
        """Forget every word. Group ids keep counting up from where they were."""
        with self._lock.write_locked():
            self._word_to_group.clear()
            self._group_to_words.clear()
        logger.info("Synonym index cleared")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, word: str) -> Set[str]:
        """Return the synonyms of ``word``, not including the word itself."""
        canonical = normalize_word(word)
        if canonical is None:
            return set()

        with self._lock.read_locked():
            group_id = self._word_to_group.get(canonical)
            if group_id is None:
                return set()
            synonyms = set(self._group_to_words[group_id])

        synonyms.discard(canonical)
        return synonyms

    def get_all(self) -> List[Set[str]]:
        """Return every synonym group as an independent set."""
        with self._lock.read_locked():
            return [set(members) for members in self._group_to_words.values()]

    def stats(self) -> IndexStats:
        with self._lock.read_locked():
            return IndexStats(words=len(self._word_to_group), groups=len(self._group_to_words))

    # ------------------------------------------------------------------
    # Internals (callers hold the write lock)
    # ------------------------------------------------------------------
    def _link(self, first: str, second: str) -> None:
        group1 = self._word_to_group.get(first)
        group2 = self._word_to_group.get(second)

        if group1 is None and group2 is None:
            group_id = next(self._sequence)
            self._assign(group_id, first)
            self._assign(group_id, second)
        elif group2 is None:
            self._assign(group1, second)
        elif group1 is None:
            self._assign(group2, first)
        elif group1 != group2:
            self._merge(group1, group2)

    def _assign(self, group_id: int, word: str) -> None:
        self._word_to_group[word] = group_id
        self._group_to_words.setdefault(group_id, set()).add(word)

    def _merge(self, group1: int, group2: int) -> None:
        members = self._group_to_words.pop(group1)
        members |= self._group_to_words.pop(group2)

        # A fresh id, so neither dissolved id ever names a live group again.
        group_id = next(self._sequence)
        for word in members:
            self._word_to_group[word] = group_id
        self._group_to_words[group_id] = members
        logger.debug("Merged synonym groups %s and %s into %s (%d words)", group1, group2, group_id, len(members))

    @staticmethod
    def _canonical_all(words) -> List[str]:
        canonical = []
        for word in words:
            normalized = normalize_word(word)
            if normalized is None:
                raise InvalidArgument("Words cannot be null nor blank")
            canonical.append(normalized)
        return canonical
