import dataclasses

import pytest

from sukakpak.events import (
    ControllerAxis,
    Event,
    KeyDown,
    KeyUp,
    MouseButton,
    MouseDown,
    MouseMoved,
    MouseUp,
    ProgramTermination,
    ReceivedCharacter,
    RedrawRequested,
    ScrollContinue,
    ScrollDelta,
    SemanticKeyCode,
    WindowResized,
)


def test_other_button_equality_by_code():
    assert MouseButton.other(7) == MouseButton.other(7)
    assert MouseButton.other(7).code == 7
    assert (MouseButton.other(7) == MouseButton.other(8)) is False


def test_named_buttons_are_distinct():
    buttons = {MouseButton.LEFT, MouseButton.RIGHT, MouseButton.MIDDLE}
    assert len(buttons) == 3
    assert MouseButton.LEFT == MouseButton("left")


@pytest.mark.parametrize("code", [-1, 0x10000, "3", True])
def test_other_button_rejects_invalid_codes(code):
    with pytest.raises(ValueError):
        MouseButton.other(code)


def test_named_button_rejects_code():
    with pytest.raises(ValueError):
        MouseButton("left", 3)


def test_unknown_button_name():
    with pytest.raises(ValueError):
        MouseButton("sideways")


def test_scroll_delta_components():
    delta = ScrollDelta((1.5, -2.25))
    assert delta.x() == 1.5
    assert delta.y() == -2.25


def test_scroll_delta_requires_two_components():
    with pytest.raises(ValueError):
        ScrollDelta((1.0, 2.0, 3.0))


def test_scroll_event_carries_delta():
    event = ScrollContinue(ScrollDelta((0.0, 4.0)))
    assert event.delta.y() == 4.0
    assert isinstance(event, Event)


def test_mouse_moved_holds_positions():
    event = MouseMoved(position=(10, 20), normalized=(0.5, -0.5))
    assert event.position == (10.0, 20.0)
    assert event.normalized == (0.5, -0.5)


def test_events_are_immutable():
    event = WindowResized((800, 800))
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.new_size = (1, 1)
    assert tuple(event.new_size) == (800, 800)


def test_events_compare_by_value():
    assert MouseDown(MouseButton.LEFT) == MouseDown(MouseButton.LEFT)
    assert (MouseDown(MouseButton.LEFT) == MouseUp(MouseButton.LEFT)) is False
    assert ProgramTermination() == ProgramTermination()
    assert (ProgramTermination() == RedrawRequested()) is False


def test_key_events_default_semantic_code():
    down = KeyDown(30)
    up = KeyUp(30, SemanticKeyCode.A)
    assert down.semantic_code is None
    assert up.semantic_code is SemanticKeyCode.A
    assert down.scan_code == up.scan_code == 30


def test_received_character_single_char():
    assert ReceivedCharacter("q").character == "q"
    with pytest.raises(ValueError):
        ReceivedCharacter("ab")
    with pytest.raises(ValueError):
        ReceivedCharacter("")


def test_controller_axis_fields():
    event = ControllerAxis(axis_id=2, value=0.75)
    assert (event.axis_id, event.value) == (2, 0.75)


def test_semantic_key_lookup_by_name():
    escape = KeyDown(1, SemanticKeyCode["ESCAPE"])
    f24 = KeyUp(2, SemanticKeyCode["F24"])
    assert escape.semantic_code is SemanticKeyCode.ESCAPE
    assert f24.semantic_code is SemanticKeyCode.F24
    assert escape != KeyDown(1, SemanticKeyCode.F24)
    assert len({key.value for key in SemanticKeyCode}) == len(SemanticKeyCode)