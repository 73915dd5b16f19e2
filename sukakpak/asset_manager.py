"""Generational storage for game assets, addressed by opaque handles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class AssetHandle:
    """Opaque reference to an asset stored in an :class:`AssetManager`."""

    index: int
    generation: int


class AssetNotFoundError(KeyError):
    """Raised when a handle does not refer to a live asset."""

    def __init__(self, handle: AssetHandle) -> None:
        super().__init__(handle)
        self.handle = handle

    def __str__(self) -> str:
        return f"asset {self.handle!r} does not exist"


@dataclass
class _Slot:
    generation: int
    value: Any = None
    occupied: bool = False


class AssetManager(Generic[T]):
    """Stores assets; handles of removed assets never match reused slots."""

    def __init__(self) -> None:
        self._slots: list[_Slot] = []
        self._free: list[int] = []
        self._generation = 0
        self._len = 0

    def _lookup(self, handle: AssetHandle) -> _Slot | None:
        if not isinstance(handle, AssetHandle):
            return None
        if not 0 <= handle.index < len(self._slots):
            return None
        slot = self._slots[handle.index]
        if slot.occupied and slot.generation == handle.generation:
            return slot
        return None

    def _require(self, handle: AssetHandle) -> _Slot:
        slot = self._lookup(handle)
        if slot is None:
            raise AssetNotFoundError(handle)
        return slot

    def insert(self, data: T) -> AssetHandle:
        """Store ``data`` and return a handle to it."""
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
            slot.generation = self._generation
            slot.value = data
            slot.occupied = True
        else:
            index = len(self._slots)
            self._slots.append(_Slot(self._generation, data, True))
        self._len += 1
        return AssetHandle(index, self._generation)

    def get(self, handle: AssetHandle) -> T | None:
        """Return the asset for ``handle``, or None if it does not exist."""
        slot = self._lookup(handle)
        return None if slot is None else slot.value

    def replace(self, handle: AssetHandle, data: T) -> T:
        """Replace the asset for ``handle`` and return the previous value."""
        slot = self._require(handle)
        old, slot.value = slot.value, data
        return old

    def update(self, handle: AssetHandle, func: Callable[[T], T]) -> T:
        """Apply ``func`` to the asset, store and return its result."""
        slot = self._require(handle)
        slot.value = func(slot.value)
        return slot.value

    def remove(self, handle: AssetHandle) -> T:
        """Remove the asset and return it; raise if it does not exist."""
        slot = self._require(handle)
        value = slot.value
        slot.value = None
        slot.occupied = False
        self._free.append(handle.index)
        self._generation += 1
        self._len -= 1
        return value

    def drain(self) -> list[tuple[AssetHandle, T]]:
        """Remove every asset and return the removed (handle, asset) pairs."""
        drained = list(self.items())
        for handle, _ in drained:
            self.remove(handle)
        return drained

    def items(self) -> Iterator[tuple[AssetHandle, T]]:
        """Yield (handle, asset) pairs for all live assets."""
        for index, slot in enumerate(self._slots):
            if slot.occupied:
                yield AssetHandle(index, slot.generation), slot.value

    def __iter__(self) -> Iterator[AssetHandle]:
        return (handle for handle, _ in self.items())

    def __len__(self) -> int:
        return self._len

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, AssetHandle) and self._lookup(handle) is not None