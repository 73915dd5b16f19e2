import pytest

from sukakpak.vertex import VertexComponent, VertexLayout


@pytest.mark.parametrize(
    "component, count",
    [
        (VertexComponent.VEC1_F32, 1),
        (VertexComponent.VEC2_F32, 2),
        (VertexComponent.VEC3_F32, 3),
        (VertexComponent.VEC4_F32, 4),
    ],
)
def test_num_components(component, count):
    assert component.num_components() == count


def test_single_float_size():
    assert VertexComponent.VEC1_F32.size() == 4


@pytest.mark.parametrize("component", list(VertexComponent))
def test_size_scales_with_components(component):
    unit = VertexComponent.VEC1_F32.size()
    assert component.size() == component.num_components() * unit


def test_stride_is_sum_of_sizes():
    layout = VertexLayout(
        [VertexComponent.VEC3_F32, VertexComponent.VEC2_F32, VertexComponent.VEC3_F32]
    )
    assert layout.stride() == sum(c.size() for c in layout.components)
    assert layout.stride() == 8 * VertexComponent.VEC1_F32.size()


def test_empty_layout_stride():
    assert VertexLayout().stride() == 0


def test_layout_equality():
    a = VertexLayout([VertexComponent.VEC2_F32])
    b = VertexLayout([VertexComponent.VEC2_F32])
    c = VertexLayout([VertexComponent.VEC3_F32])
    assert a == b
    assert (a == c) is False