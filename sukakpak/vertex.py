"""Vertex component types and vertex layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_F32_SIZE = 4


class VertexComponent(Enum):
    """A float vector component of a vertex."""

    VEC1_F32 = 1
    VEC2_F32 = 2
    VEC3_F32 = 3
    VEC4_F32 = 4

    def num_components(self) -> int:
        """Number of scalars in the component."""
        return self.value

    def size(self) -> int:
        """Size of the component in bytes."""
        return self.value * _F32_SIZE


@dataclass
class VertexLayout:
    """Layout of a vertex; the order gives each component's location."""

    components: list[VertexComponent] = field(default_factory=list)

    def stride(self) -> int:
        """Total size in bytes of one vertex."""
        return sum(component.size() for component in self.components)