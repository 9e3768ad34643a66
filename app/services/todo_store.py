"""In-memory todo store keyed by username."""
from typing import Dict, List
import threading

from app.utils.logger import get_logger

logger = get_logger(__name__)


class TodoStore:
    """
    Registry mapping a username to its ordered list of todos.

    Usernames are used verbatim as keys ("Alice" and "alice" are different
    users). A username that was never added to reads the same as one with an
    empty list. Indices are 0-based and shift left after a delete, so callers
    must re-fetch the list before deleting again.
    """

    def __init__(self):
        self.entries: Dict[str, List[str]] = {}
        self._lock = threading.Lock()

    def add(self, username: str, todo: str) -> str:
        """Append a todo to the user's list and echo it back."""
        self.append(username, todo)
        return todo

    def append(self, username: str, todo: str) -> int:
        """Append a todo and return the index it was stored at."""
        with self._lock:
            todos = self.entries.setdefault(username, [])
            todos.append(todo)
            position = len(todos) - 1
        logger.debug("todo_added", username=username, index=position)
        return position

    def list(self, username: str) -> List[str]:
        """Return a copy of the user's todos in insertion order."""
        with self._lock:
            return list(self.entries.get(username, []))

    def delete(self, username: str, index: int) -> bool:
        """
        Remove the todo at ``index`` for ``username``.

        Unknown users and out-of-range indices (negative included) are ignored.

        Returns:
            True if a todo was removed, False if the call was a no-op
        """
        with self._lock:
            todos = self.entries.get(username)
            if todos is None:
                reason = "unknown_user"
            elif not 0 <= index < len(todos):
                reason = "index_out_of_range"
            else:
                del todos[index]
                reason = None

        if reason is not None:
            logger.debug("todo_delete_ignored", username=username, index=index, reason=reason)
            return False

        logger.debug("todo_deleted", username=username, index=index)
        return True

    def count(self, username: str) -> int:
        with self._lock:
            return len(self.entries.get(username, []))

    def usernames(self) -> List[str]:
        with self._lock:
            return list(self.entries.keys())
