# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Journal and PersistenceManager - single responsibility example.

Journal only keeps entries; writing them somewhere is the job of
PersistenceManager.

Example:
    >>> journal = Journal('My Journal')
    >>> journal.add_entry('I cried today.')
    >>> journal.add_entry('I ate a bug.')
    >>> journal.entries
    ['1: I cried today.', '2: I ate a bug.']
    >>> PersistenceManager.save(journal, 'journal.txt')
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class Journal:
    """A titled list of numbered entries."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.entries: list[str] = []

    def __repr__(self) -> str:
        return f"Journal({self.title!r}, entries={len(self.entries)})"

    def add_entry(self, entry: str) -> None:
        """Append entry, numbered from 1 within this journal."""
        self.entries.append(f"{len(self.entries) + 1}: {entry}")


class PersistenceManager:
    """Writes journals to files."""

    @staticmethod
    def save(journal: Journal, filename: str | Path) -> Path:
        """Write each journal entry as one line of filename.

        Missing parent directories are created; an existing file is
        overwritten.

        Returns:
            The path written.
        """
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(''.join(f"{entry}\n" for entry in journal.entries))
        logger.debug(
            "Saved %d entries of %r to %s",
            len(journal.entries), journal.title, path,
        )
        return path
