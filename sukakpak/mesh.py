"""Mesh data: raw vertex bytes, indices, a layout, and built-in shapes."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Optional, Union

from .vertex import VertexComponent, VertexLayout

_VERTEX_FORMAT = struct.Struct("=8f")


class ObjParseError(ValueError):
    """Raised when OBJ data cannot be turned into a mesh."""


def _standard_layout() -> VertexLayout:
    return VertexLayout(
        [
            VertexComponent.VEC3_F32,
            VertexComponent.VEC2_F32,
            VertexComponent.VEC3_F32,
        ]
    )


@dataclass(frozen=True)
class Vertex:
    """A vertex with position, texture coordinate and normal."""

    position: tuple[float, float, float]
    uv: tuple[float, float]
    normal: tuple[float, float, float]

    def to_bytes(self) -> bytes:
        """Pack as eight native-order 32-bit floats."""
        return _VERTEX_FORMAT.pack(*self.position, *self.uv, *self.normal)


@dataclass
class EasyMesh:
    """A mesh given as structured vertices."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def to_mesh(self) -> "Mesh":
        """Pack the vertices into a :class:`Mesh`."""
        return Mesh(
            vertices=b"".join(vertex.to_bytes() for vertex in self.vertices),
            indices=list(self.indices),
            vertex_layout=_standard_layout(),
        )


def _floats(args: list[str], minimum: int, lineno: int, what: str) -> tuple[float, ...]:
    if len(args) < minimum:
        raise ObjParseError(f"line {lineno}: {what} needs {minimum} values")
    try:
        return tuple(float(arg) for arg in args[:minimum])
    except ValueError:
        raise ObjParseError(f"line {lineno}: invalid {what}") from None


def _resolve(raw: str, count: int, lineno: int) -> int:
    try:
        index = int(raw)
    except ValueError:
        raise ObjParseError(f"line {lineno}: invalid index {raw!r}") from None
    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = count + index
    else:
        raise ObjParseError(f"line {lineno}: index 0 is not valid")
    if not 0 <= resolved < count:
        raise ObjParseError(f"line {lineno}: index {index} out of range")
    return resolved


_Corner = tuple[int, Optional[int], Optional[int]]


def _parse_corner(token: str, counts: tuple[int, int, int], lineno: int) -> _Corner:
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise ObjParseError(f"line {lineno}: invalid face vertex {token!r}")
    position = _resolve(parts[0], counts[0], lineno)
    uv = _resolve(parts[1], counts[1], lineno) if len(parts) > 1 and parts[1] else None
    normal = _resolve(parts[2], counts[2], lineno) if len(parts) > 2 and parts[2] else None
    return position, uv, normal


@dataclass
class Mesh:
    """Mesh asset ready to upload: packed vertices, indices and layout."""

    vertices: bytes
    indices: list[int]
    vertex_layout: VertexLayout

    def num_vertices(self) -> int:
        """Number of vertices drawn, i.e. the number of indices."""
        return len(self.indices)

    @classmethod
    def from_obj_lines(cls, lines: Iterable[str]) -> "Mesh":
        """Build a mesh from the first object of OBJ text, triangulated."""
        positions: list[tuple[float, ...]] = []
        texcoords: list[tuple[float, ...]] = []
        normals: list[tuple[float, ...]] = []
        faces: list[list[_Corner]] = []
        for lineno, raw_line in enumerate(lines, 1):
            line = raw_line.split("#", 1)[0].strip()
            if not line:
                continue
            keyword, *args = line.split()
            if keyword == "v":
                positions.append(_floats(args, 3, lineno, "position"))
            elif keyword == "vt":
                texcoords.append(_floats(args, 2, lineno, "texture coordinate"))
            elif keyword == "vn":
                normals.append(_floats(args, 3, lineno, "normal"))
            elif keyword == "f":
                if len(args) < 3:
                    raise ObjParseError(f"line {lineno}: face needs three vertices")
                counts = (len(positions), len(texcoords), len(normals))
                faces.append([_parse_corner(token, counts, lineno) for token in args])
            elif keyword in ("o", "g", "usemtl") and faces:
                break
        if not faces:
            raise ObjParseError("OBJ data holds no faces")

        unique: dict[_Corner, int] = {}
        indices: list[int] = []
        for face in faces:
            corner_ids = [unique.setdefault(corner, len(unique)) for corner in face]
            first = corner_ids[0]
            for second, third in zip(corner_ids[1:], corner_ids[2:]):
                indices.extend((first, second, third))

        packed = []
        for position, uv, normal in unique:
            if uv is None:
                raise ObjParseError("mesh has no texture coordinates")
            if normal is None:
                raise ObjParseError("mesh has no normals")
            vertex = Vertex(positions[position], texcoords[uv], normals[normal])
            packed.append(vertex.to_bytes())
        return cls(b"".join(packed), indices, _standard_layout())

    @classmethod
    def from_obj(cls, path: Union[str, PathLike]) -> "Mesh":
        """Load a mesh from an OBJ file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_obj_lines(handle)

    @classmethod
    def new_triangle(cls) -> "Mesh":
        normal = (0.0, 0.0, 1.0)
        return EasyMesh(
            vertices=[
                Vertex((-0.5, -0.5, 0.0), (0.0, 0.0), normal),
                Vertex((0.5, -0.5, 0.0), (1.0, 0.0), normal),
                Vertex((0.0, 0.5, 0.0), (0.5, 1.0), normal),
            ],
            indices=[0, 1, 2],
        ).to_mesh()

    @classmethod
    def new_plane(cls) -> "Mesh":
        normal = (0.0, 0.0, 1.0)
        return EasyMesh(
            vertices=[
                Vertex((0.0, 0.0, 0.0), (0.0, 0.0), normal),
                Vertex((1.0, 0.0, 0.0), (1.0, 0.0), normal),
                Vertex((1.0, 1.0, 0.0), (1.0, 1.0), normal),
                Vertex((0.0, 1.0, 0.0), (0.0, 1.0), normal),
            ],
            indices=[0, 2, 1, 0, 3, 2],
        ).to_mesh()

    @classmethod
    def new_cube(cls) -> "Mesh":
        normal = (-1.0, 0.0, 0.0)
        corners = [
            # face 0
            ((1.0, 0.0, 1.0), (2.0 / 6.0, 0.0)),
            ((1.0, 0.0, 0.0), (2.0 / 6.0, 1.0)),
            ((1.0, 1.0, 0.0), (1.0 / 6.0, 1.0)),
            ((1.0, 1.0, 1.0), (1.0 / 6.0, 0.0)),
            # face 1
            ((1.0, 0.0, 0.0), (3.0 / 6.0, 0.0)),
            ((0.0, 0.0, 0.0), (3.0 / 6.0, 1.0)),
            ((1.0, 1.0, 0.0), (2.0 / 6.0, 0.0)),
            ((0.0, 1.0, 0.0), (2.0 / 6.0, 1.0)),
            # face 2
            ((0.0, 0.0, 0.0), (4.0 / 6.0, 0.0)),
            ((0.0, 0.0, 1.0), (4.0 / 6.0, 1.0)),
            ((0.0, 1.0, 0.0), (3.0 / 6.0, 0.0)),
            ((0.0, 1.0, 1.0), (3.0 / 6.0, 1.0)),
            # face 3
            ((0.0, 0.0, 1.0), (5.0 / 6.0, 0.0)),
            ((1.0, 0.0, 1.0), (5.0 / 6.0, 1.0)),
            ((0.0, 1.0, 1.0), (4.0 / 6.0, 0.0)),
            ((1.0, 1.0, 1.0), (4.0 / 6.0, 1.0)),
            # face 4
            ((1.0, 1.0, 1.0), (0.0, 0.0)),
            ((1.0, 1.0, 0.0), (1.0 / 6.0, 0.0)),
            ((0.0, 1.0, 1.0), (0.0, 1.0)),
            ((0.0, 1.0, 0.0), (1.0 / 6.0, 1.0)),
            # face 5
            ((1.0, 0.0, 1.0), (5.0 / 6.0, 0.0)),
            ((1.0, 0.0, 0.0), (5.0 / 6.0, 1.0)),
            ((0.0, 0.0, 1.0), (1.0, 0.0)),
            ((0.0, 0.0, 0.0), (1.0, 1.0)),
        ]
        triangles = [
            (0, 1, 2),
            (0, 2, 3),
            (5, 6, 4),
            (5, 7, 6),
            (8, 9, 10),
            (10, 9, 11),
            (12, 13, 15),
            (12, 15, 14),
            (16, 17, 19),
            (16, 19, 18),
            (20, 23, 21),
            (20, 22, 23),
        ]
        return EasyMesh(
            vertices=[Vertex(position, uv, normal) for position, uv in corners],
            indices=[index for triangle in triangles for index in triangle],
        ).to_mesh()