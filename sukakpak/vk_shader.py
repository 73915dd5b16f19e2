"""Compiled SPIR-V shader modules and their on-disk JSON form."""

from __future__ import annotations

import json
import struct
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, ClassVar, Union

from .shader_types import ShaderType, VertexInput

VERTEX_SHADER_MAIN = "vs_main"
FRAGMENT_SHADER_MAIN = "fs_main"

_U32_LIMIT = 2**32

PathArg = Union[str, PathLike]


class ShaderFormatError(ValueError):
    """Raised when serialized shader data is malformed."""


def _field(data: Any, key: str, what: str) -> Any:
    if not isinstance(data, dict):
        raise ShaderFormatError(f"invalid {what}: {data!r}")
    try:
        return data[key]
    except KeyError:
        raise ShaderFormatError(f"{what} is missing {key!r}") from None


def _u32(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < _U32_LIMIT:
        raise ShaderFormatError(f"invalid {what}: {value!r}")
    return value


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise ShaderFormatError(f"invalid {what}: {value!r}")
    return value


def _list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise ShaderFormatError(f"invalid {what}: {value!r}")
    return value


def _with_extension(path: PathArg, extension: str) -> Path:
    return Path(path).with_suffix("." + extension)


@dataclass(frozen=True)
class PushConstant:
    """Push constant; always taken to live in the vertex shader."""

    ty: ShaderType

    def size(self) -> int:
        """Size in bytes."""
        return self.ty.size()


@dataclass(frozen=True)
class Texture:
    """A texture bound as global shader input."""

    binding: int
    name: str


@dataclass(frozen=True)
class Sampler:
    """A sampler used by the shader."""

    binding: int
    group: int
    name: str


@dataclass(frozen=True)
class Options:
    """Options for building a shader."""

    verbose: bool = False


@dataclass
class Shader:
    """A shader compiled to SPIR-V with the reflection data an engine needs."""

    push_constant: PushConstant
    vertex_input: VertexInput
    fragment_spirv_data: list[int]
    vertex_spirv_data: list[int]
    textures: list[Texture] = field(default_factory=list)
    samplers: list[Sampler] = field(default_factory=list)
    vertex_entrypoint: str = VERTEX_SHADER_MAIN
    fragment_entrypoint: str = FRAGMENT_SHADER_MAIN

    EXTENSION: ClassVar[str] = "ass_spv"
    SPV_EXTENSION: ClassVar[str] = "spv"

    def _to_data(self) -> dict[str, Any]:
        return {
            "push_constant": {"ty": self.push_constant.ty.to_data()},
            "vertex_input": self.vertex_input.to_data(),
            "fragment_spirv_data": list(self.fragment_spirv_data),
            "vertex_spirv_data": list(self.vertex_spirv_data),
            "textures": [
                {"binding": tex.binding, "name": tex.name} for tex in self.textures
            ],
            "samplers": [
                {"binding": s.binding, "group": s.group, "name": s.name}
                for s in self.samplers
            ],
            "vertex_entrypoint": self.vertex_entrypoint,
            "fragment_entrypoint": self.fragment_entrypoint,
        }

    @classmethod
    def _from_data(cls, data: Any) -> "Shader":
        push = _field(data, "push_constant", "shader")
        try:
            push_type = ShaderType.from_data(_field(push, "ty", "push constant"))
            vertex_input = VertexInput.from_data(_field(data, "vertex_input", "shader"))
        except ShaderFormatError:
            raise
        except ValueError as error:
            raise ShaderFormatError(str(error)) from None
        fragment = [
            _u32(word, "fragment spirv word")
            for word in _list(_field(data, "fragment_spirv_data", "shader"), "fragment spirv data")
        ]
        vertex = [
            _u32(word, "vertex spirv word")
            for word in _list(_field(data, "vertex_spirv_data", "shader"), "vertex spirv data")
        ]
        textures = [
            Texture(
                _u32(_field(tex, "binding", "texture"), "texture binding"),
                _string(_field(tex, "name", "texture"), "texture name"),
            )
            for tex in _list(_field(data, "textures", "shader"), "textures")
        ]
        samplers = [
            Sampler(
                _u32(_field(s, "binding", "sampler"), "sampler binding"),
                _u32(_field(s, "group", "sampler"), "sampler group"),
                _string(_field(s, "name", "sampler"), "sampler name"),
            )
            for s in _list(_field(data, "samplers", "shader"), "samplers")
        ]
        return cls(
            push_constant=PushConstant(push_type),
            vertex_input=vertex_input,
            fragment_spirv_data=fragment,
            vertex_spirv_data=vertex,
            textures=textures,
            samplers=samplers,
            vertex_entrypoint=_string(
                _field(data, "vertex_entrypoint", "shader"), "vertex entrypoint"
            ),
            fragment_entrypoint=_string(
                _field(data, "fragment_entrypoint", "shader"), "fragment entrypoint"
            ),
        )

    def to_json_string(self) -> str:
        """Serialize to compact JSON."""
        return json.dumps(self._to_data(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json_str(cls, json_text: str) -> "Shader":
        """Parse a shader from JSON; raise ShaderFormatError if malformed."""
        try:
            data = json.loads(json_text)
        except json.JSONDecodeError as error:
            raise ShaderFormatError(f"invalid shader json: {error}") from None
        return cls._from_data(data)

    def _write_spirv(self, path: PathArg, words: list[int]) -> Path:
        target = _with_extension(path, self.SPV_EXTENSION)
        target.write_bytes(struct.pack(f"={len(words)}I", *words))
        return target

    def write_vertex_to_disk(self, path: PathArg) -> Path:
        """Write raw vertex SPIR-V with extension ".spv"; return the path."""
        return self._write_spirv(path, self.vertex_spirv_data)

    def write_fragment_to_disk(self, path: PathArg) -> Path:
        """Write raw fragment SPIR-V with extension ".spv"; return the path."""
        return self._write_spirv(path, self.fragment_spirv_data)

    def write_to_disk(self, path: PathArg) -> Path:
        """Write JSON with extension ".ass_spv"; return the path."""
        target = _with_extension(path, self.EXTENSION)
        target.write_text(self.to_json_string(), encoding="utf-8")
        return target

    @classmethod
    def read_from_disk(cls, path: PathArg) -> "Shader":
        """Read a shader, setting the extension to ".ass_spv"."""
        source = _with_extension(path, cls.EXTENSION)
        return cls.from_json_str(source.read_text(encoding="utf-8"))