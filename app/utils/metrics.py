"""
Metrics Collection for the TODO plugin service.

Counts store operations served over HTTP.
"""

from typing import Dict, Any
from collections import defaultdict
from datetime import datetime, timezone
import threading


class MetricsCollector:
    """Collects and manages request counters for the todo routes."""

    def __init__(self):
        """Initialize metrics collector."""
        self.metrics = defaultdict(int)
        self.lock = threading.Lock()

        # Initialize counters
        self.metrics["todos_added_total"] = 0
        self.metrics["todos_listed_total"] = 0
        self.metrics["todos_deleted_total"] = 0
        self.metrics["todo_deletes_ignored_total"] = 0

    def increment_counter(self, metric_name: str, value: int = 1):
        """Increment a counter metric."""
        with self.lock:
            self.metrics[metric_name] += value

    def get_metrics(self) -> Dict[str, Any]:
        """Get current metrics values."""
        with self.lock:
            return {
                "counters": dict(self.metrics),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

    def todo_added(self):
        """Record that a todo was added."""
        self.increment_counter("todos_added_total")

    def todos_listed(self):
        """Record that a todo list was read."""
        self.increment_counter("todos_listed_total")

    def todo_deleted(self, removed: bool):
        """Record a delete request, split by whether it removed anything."""
        if removed:
            self.increment_counter("todos_deleted_total")
        else:
            self.increment_counter("todo_deletes_ignored_total")
