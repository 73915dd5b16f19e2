"""GLSL shader modules for WebGL and their on-disk JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, ClassVar, Union

from .shader_types import VertexInput
from .vk_shader import ShaderFormatError

PathArg = Union[str, PathLike]


def _get(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ShaderFormatError(f"invalid shader: {data!r}")
    try:
        return data[key]
    except KeyError:
        raise ShaderFormatError(f"shader is missing {key!r}") from None


def _text(data: Any, key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise ShaderFormatError(f"invalid {key}: {value!r}")
    return value


@dataclass(frozen=True)
class Options:
    """Options for building a shader."""

    verbose: bool = False


@dataclass(frozen=True)
class Shader:
    """GLSL shader module with the names the engine binds to."""

    fragment_shader: str
    vertex_shader: str
    texture_name: str
    uniform_name: str
    vertex_input: VertexInput

    EXTENSION: ClassVar[str] = "ass_glsl"

    def to_json_string(self) -> str:
        """Serialize to compact JSON."""
        data = {
            "fragment_shader": self.fragment_shader,
            "vertex_shader": self.vertex_shader,
            "texture_name": self.texture_name,
            "uniform_name": self.uniform_name,
            "vertex_input": self.vertex_input.to_data(),
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json_str(cls, json_text: str) -> "Shader":
        """Parse a shader from JSON; raise ShaderFormatError if malformed."""
        try:
            data = json.loads(json_text)
        except json.JSONDecodeError as error:
            raise ShaderFormatError(f"invalid shader json: {error}") from None
        try:
            vertex_input = VertexInput.from_data(_get(data, "vertex_input"))
        except ShaderFormatError:
            raise
        except ValueError as error:
            raise ShaderFormatError(str(error)) from None
        return cls(
            fragment_shader=_text(data, "fragment_shader"),
            vertex_shader=_text(data, "vertex_shader"),
            texture_name=_text(data, "texture_name"),
            uniform_name=_text(data, "uniform_name"),
            vertex_input=vertex_input,
        )

    def write_to_disk(self, path: PathArg) -> Path:
        """Write JSON with extension ".ass_glsl"; return the path."""
        target = Path(path).with_suffix("." + self.EXTENSION)
        target.write_text(self.to_json_string(), encoding="utf-8")
        return target

    @classmethod
    def read_from_disk(cls, path: PathArg) -> "Shader":
        """Read a shader, setting the extension to ".ass_glsl"."""
        source = Path(path).with_suffix("." + cls.EXTENSION)
        return cls.from_json_str(source.read_text(encoding="utf-8"))