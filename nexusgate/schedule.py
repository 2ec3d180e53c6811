"""Bounded, thread-safe store of pending downlink schedules."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Schedule:
    """A payload waiting to be sent to a device."""

    kind: int
    data: bytes
    device_id: bytes
    device_tag: bytes

    @property
    def data_len(self) -> int:
        return len(self.data)


class ScheduleFullError(Exception):
    """Raised when a schedule is pushed onto a full queue."""


class ScheduleQueue:
    """Holds schedules until a device with a matching tag checks in."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._items: list[Schedule] = []
        self._lock = threading.Lock()

    def push(self, schedule: Schedule) -> None:
        with self._lock:
            if len(self._items) >= self.capacity:
                log.warning("schedules len %d are full", len(self._items))
                raise ScheduleFullError(f"schedule queue holds {len(self._items)} entries")
            self._items.append(schedule)
            log.debug("increased schedules len to %d", len(self._items))

    def find(self, device_tag: bytes) -> Schedule | None:
        """Remove and return the oldest schedule for the tag, or None."""
        tag = bytes(device_tag)
        with self._lock:
            for position, schedule in enumerate(self._items):
                if schedule.device_tag == tag:
                    del self._items[position]
                    log.debug("decrease schedules len to %d", len(self._items))
                    return schedule
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)