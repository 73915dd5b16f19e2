"""Tracks resources that may only be freed once no renderpass uses them."""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class FreeList(Generic[T]):
    """Deferred free list keyed by renderpass id."""

    def __init__(self) -> None:
        self._to_free: set[T] = set()
        self._by_renderpass: dict[int, list[T]] = {}

    def push(self, item: T, renderpass: int) -> None:
        """Mark ``item`` as used by ``renderpass``."""
        self._by_renderpass.setdefault(renderpass, []).append(item)

    def try_free(self, item: T) -> None:
        """Mark ``item`` to be freed once it is no longer used."""
        self._to_free.add(item)

    def is_used(self, item: T) -> bool:
        """Return whether ``item`` is used in any renderpass."""
        return any(item in items for items in self._by_renderpass.values())

    def finish_renderpass(self, done_renderpass: int) -> set[T]:
        """Finish a renderpass and return the items that may now be freed."""
        still_used = {
            item
            for pass_id, items in self._by_renderpass.items()
            if pass_id != done_renderpass
            for item in items
        }
        freed = self._to_free - still_used
        self._to_free -= freed
        self._by_renderpass.pop(done_renderpass, None)
        return freed

    def __repr__(self) -> str:
        return (
            f"FreeList(to_free={self._to_free!r}, "
            f"by_renderpass={self._by_renderpass!r})"
        )