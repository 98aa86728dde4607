"""Tracking of resources that become available once their assets have loaded."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable

InsertLoadedResource = Callable[[Any, Hashable], None]


@dataclass
class ResourceHandles:
    """Queue of asset handles waiting to load, and those that have finished."""

    waiting: deque[tuple[Hashable, InsertLoadedResource]] = field(default_factory=deque)
    finished: list[Hashable] = field(default_factory=list)

    def load_resource(self, handle: Hashable, insert: InsertLoadedResource) -> ResourceHandles:
        """Queue ``handle``; ``insert(world, handle)`` runs once it is fully loaded."""
        self.waiting.append((handle, insert))
        return self

    def is_all_done(self) -> bool:
        """Return True if every requested resource has finished loading."""
        return not self.waiting

    def load_resource_assets(self, is_loaded: Callable[[Hashable], bool], world: Any) -> None:
        """Cycle once through the waiting queue, inserting every loaded resource."""
        for _ in range(len(self.waiting)):
            handle, insert = self.waiting.popleft()
            if is_loaded(handle):
                insert(world, handle)
                self.finished.append(handle)
            else:
                self.waiting.append((handle, insert))