"""Types that describe shader inputs, with a JSON-compatible data form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Scalar(Enum):
    """Scalar element type."""

    F32 = "F32"
    U32 = "U32"

    def size(self) -> int:
        """Size in bytes."""
        return 4


class ShaderKind(Enum):
    """Shape of a shader type."""

    MAT4X4 = "Mat4x4"
    VEC4 = "Vec4"
    VEC3 = "Vec3"
    VEC2 = "Vec2"
    SCALAR = "Scalar"
    STRUCT = "Struct"


_ELEMENT_COUNTS = {
    ShaderKind.MAT4X4: 16,
    ShaderKind.VEC4: 4,
    ShaderKind.VEC3: 3,
    ShaderKind.VEC2: 2,
    ShaderKind.SCALAR: 1,
}


def _parse_scalar(value: Any) -> Scalar:
    try:
        return Scalar(value)
    except (ValueError, TypeError):
        raise ValueError(f"invalid scalar: {value!r}") from None


def _parse_u32(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**32:
        raise ValueError(f"invalid {what}: {value!r}")
    return value


@dataclass(frozen=True)
class ShaderType:
    """A type usable by a shader: vector, matrix, scalar or struct."""

    kind: ShaderKind
    scalar: Optional[Scalar] = None
    members: tuple[tuple[Optional[str], "ShaderType"], ...] = ()

    def __post_init__(self) -> None:
        if self.kind is ShaderKind.STRUCT:
            if self.scalar is not None:
                raise ValueError("struct types take members, not a scalar")
            object.__setattr__(self, "members", tuple(self.members))
        else:
            if self.scalar is None:
                raise ValueError(f"{self.kind.value} requires a scalar")
            if self.members:
                raise ValueError(f"{self.kind.value} cannot have members")

    def size(self) -> int:
        """Size in bytes."""
        if self.kind is ShaderKind.STRUCT:
            return sum(ty.size() for _, ty in self.members)
        return _ELEMENT_COUNTS[self.kind] * self.scalar.size()

    def to_data(self) -> dict[str, Any]:
        """Externally tagged JSON-compatible form."""
        if self.kind is ShaderKind.STRUCT:
            return {
                self.kind.value: [[name, ty.to_data()] for name, ty in self.members]
            }
        return {self.kind.value: self.scalar.value}

    @classmethod
    def from_data(cls, data: Any) -> "ShaderType":
        """Build from the form produced by :meth:`to_data`."""
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError(f"invalid shader type: {data!r}")
        ((tag, payload),) = data.items()
        try:
            kind = ShaderKind(tag)
        except ValueError:
            raise ValueError(f"unknown shader type: {tag!r}") from None
        if kind is not ShaderKind.STRUCT:
            return cls(kind, _parse_scalar(payload))
        if not isinstance(payload, list):
            raise ValueError(f"invalid struct members: {payload!r}")
        members = []
        for member in payload:
            if not isinstance(member, (list, tuple)) or len(member) != 2:
                raise ValueError(f"invalid struct member: {member!r}")
            name, ty = member
            if name is not None and not isinstance(name, str):
                raise ValueError(f"invalid member name: {name!r}")
            members.append((name, cls.from_data(ty)))
        return cls(kind, members=tuple(members))


@dataclass(frozen=True)
class VertexField:
    """A field of a vertex."""

    ty: ShaderType
    location: int
    name: str

    def size(self) -> int:
        """Size in bytes."""
        return self.ty.size()

    def to_data(self) -> dict[str, Any]:
        return {"ty": self.ty.to_data(), "location": self.location, "name": self.name}

    @classmethod
    def from_data(cls, data: Any) -> "VertexField":
        if not isinstance(data, dict):
            raise ValueError(f"invalid vertex field: {data!r}")
        try:
            ty, location, name = data["ty"], data["location"], data["name"]
        except KeyError as missing:
            raise ValueError(f"vertex field is missing {missing}") from None
        if not isinstance(name, str):
            raise ValueError(f"invalid field name: {name!r}")
        return cls(ShaderType.from_data(ty), _parse_u32(location, "location"), name)


@dataclass(frozen=True)
class VertexInput:
    """Describes the vertex input of a shader."""

    binding: int
    fields: tuple[VertexField, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def to_data(self) -> dict[str, Any]:
        return {
            "binding": self.binding,
            "fields": [f.to_data() for f in self.fields],
        }

    @classmethod
    def from_data(cls, data: Any) -> "VertexInput":
        if not isinstance(data, dict):
            raise ValueError(f"invalid vertex input: {data!r}")
        try:
            binding, fields = data["binding"], data["fields"]
        except KeyError as missing:
            raise ValueError(f"vertex input is missing {missing}") from None
        if not isinstance(fields, list):
            raise ValueError(f"invalid fields: {fields!r}")
        return cls(
            _parse_u32(binding, "binding"),
            tuple(VertexField.from_data(f) for f in fields),
        )