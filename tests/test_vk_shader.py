import json
import struct

import pytest

from sukakpak.shader_types import (
    Scalar,
    ShaderKind,
    ShaderType,
    VertexField,
    VertexInput,
)
from sukakpak.vk_shader import (
    PushConstant,
    Sampler,
    Shader,
    ShaderFormatError,
    Texture,
)


def _make_shader() -> Shader:
    mat = ShaderType(ShaderKind.MAT4X4, Scalar.F32)
    vertex_input = VertexInput(
        0,
        (
            VertexField(ShaderType(ShaderKind.VEC3, Scalar.F32), 0, "position"),
            VertexField(ShaderType(ShaderKind.VEC2, Scalar.F32), 1, "uv"),
        ),
    )
    return Shader(
        push_constant=PushConstant(mat),
        vertex_input=vertex_input,
        fragment_spirv_data=[7, 8, 9],
        vertex_spirv_data=[1, 2, 3, 4],
        textures=[Texture(0, "mesh_texture")],
        samplers=[Sampler(1, 1, "mesh_sampler")],
    )


def test_push_constant_size_matches_type():
    ty = ShaderType(ShaderKind.VEC4, Scalar.U32)
    assert PushConstant(ty).size() == ty.size()


def test_default_entrypoints():
    shader = _make_shader()
    assert shader.vertex_entrypoint == "vs_main"
    assert shader.fragment_entrypoint == "fs_main"


def test_json_round_trip():
    shader = _make_shader()
    assert Shader.from_json_str(shader.to_json_string()) == shader


def test_json_field_order_and_tagging():
    data = json.loads(_make_shader().to_json_string())
    assert list(data) == [
        "push_constant",
        "vertex_input",
        "fragment_spirv_data",
        "vertex_spirv_data",
        "textures",
        "samplers",
        "vertex_entrypoint",
        "fragment_entrypoint",
    ]
    assert data["push_constant"] == {"ty": {"Mat4x4": "F32"}}
    assert data["samplers"] == [{"binding": 1, "group": 1, "name": "mesh_sampler"}]


def test_json_is_compact():
    text = _make_shader().to_json_string()
    assert text == json.dumps(json.loads(text), separators=(",", ":"))


def test_write_and_read_disk(tmp_path):
    shader = _make_shader()
    written = shader.write_to_disk(tmp_path / "shader.json")
    assert written == tmp_path / "shader.ass_spv"
    assert written.exists()
    assert Shader.read_from_disk(tmp_path / "shader") == shader


def test_write_vertex_spirv(tmp_path):
    shader = _make_shader()
    written = shader.write_vertex_to_disk(tmp_path / "vert")
    assert written == tmp_path / "vert.spv"
    data = written.read_bytes()
    assert data == struct.pack("=4I", *shader.vertex_spirv_data)


def test_write_fragment_spirv(tmp_path):
    shader = _make_shader()
    written = shader.write_fragment_to_disk(tmp_path / "frag.bin")
    assert written == tmp_path / "frag.spv"
    words = struct.unpack("=3I", written.read_bytes())
    assert list(words) == shader.fragment_spirv_data


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Shader.read_from_disk(tmp_path / "absent")


def test_invalid_json_raises():
    with pytest.raises(ShaderFormatError):
        Shader.from_json_str("{not json")


def test_missing_key_raises():
    data = json.loads(_make_shader().to_json_string())
    del data["samplers"]
    with pytest.raises(ShaderFormatError):
        Shader.from_json_str(json.dumps(data))


@pytest.mark.parametrize("word", [-1, 2**32, "x", True])
def test_invalid_spirv_word_raises(word):
    data = json.loads(_make_shader().to_json_string())
    data["vertex_spirv_data"] = [word]
    with pytest.raises(ShaderFormatError):
        Shader.from_json_str(json.dumps(data))


def test_invalid_push_type_raises():
    data = json.loads(_make_shader().to_json_string())
    data["push_constant"] = {"ty": {"Mat3x3": "F32"}}
    with pytest.raises(ShaderFormatError):
        Shader.from_json_str(json.dumps(data))