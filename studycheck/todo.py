# studycheck/todo.py

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Todo:
    title: str
    created_at: datetime
    id: uuid.UUID = field(default_factory=uuid.uuid4)


class TodoList:
    """Geordnete To-do-Liste: anhängen am Ende, löschen per Position."""

    def __init__(self):
        self._items: List[Todo] = []

    def add(self, title: str) -> Optional[Todo]:
        title = title.strip()
        if not title:
            return None
        todo = Todo(title=title, created_at=datetime.now())
        self._items.append(todo)
        logger.info("To-do hinzugefügt: %s", title)
        return todo

    def remove(self, offsets: Iterable[int]):
        """
        Entfernt die Einträge an den angegebenen Positionen.

        Doppelte Positionen zählen einmal. Ist eine Position ungültig,
        wird IndexError geworfen und die Liste bleibt unverändert.
        """
        positions = sorted(set(offsets), reverse=True)
        for pos in positions:
            if not 0 <= pos < len(self._items):
                raise IndexError(f"todo offset out of range: {pos}")
        # Von hinten löschen, damit die übrigen Positionen gültig bleiben
        for pos in positions:
            removed = self._items.pop(pos)
            logger.info("To-do entfernt: %s", removed.title)

    def titles(self) -> List[str]:
        return [t.title for t in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Todo:
        return self._items[index]
