"""Window and input events delivered to a renderable each frame."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Optional

_BUTTON_NAMES = ("left", "right", "middle", "other")
_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class MouseButton:
    """A mouse button; unnamed buttons carry their numeric code."""

    name: str
    code: Optional[int] = None

    LEFT: ClassVar["MouseButton"]
    RIGHT: ClassVar["MouseButton"]
    MIDDLE: ClassVar["MouseButton"]

    def __post_init__(self) -> None:
        if self.name not in _BUTTON_NAMES:
            raise ValueError(f"unknown mouse button: {self.name!r}")
        if self.name == "other":
            code = self.code
            if isinstance(code, bool) or not isinstance(code, int):
                raise ValueError(f"invalid mouse button code: {code!r}")
            if not 0 <= code <= _U16_MAX:
                raise ValueError(f"mouse button code out of range: {code}")
        elif self.code is not None:
            raise ValueError(f"{self.name} mouse button takes no code")

    @classmethod
    def other(cls, code: int) -> "MouseButton":
        """A button identified only by its 16-bit code."""
        return cls("other", code)


MouseButton.LEFT = MouseButton("left")
MouseButton.RIGHT = MouseButton("right")
MouseButton.MIDDLE = MouseButton("middle")


def _vec2(value: tuple[float, float], what: str) -> tuple[float, float]:
    items = tuple(value)
    if len(items) != 2:
        raise ValueError(f"{what} must have two components, got {len(items)}")
    return (float(items[0]), float(items[1]))


@dataclass(frozen=True)
class ScrollDelta:
    """Amount scrolled along each axis."""

    delta: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "delta", _vec2(self.delta, "scroll delta"))

    def x(self) -> float:
        return self.delta[0]

    def y(self) -> float:
        return self.delta[1]


class SemanticKeyCode(Enum):
    """Keyboard key identified by meaning rather than scan code."""

    KEY1 = auto()
    KEY2 = auto()
    KEY3 = auto()
    KEY4 = auto()
    KEY5 = auto()
    KEY6 = auto()
    KEY7 = auto()
    KEY8 = auto()
    KEY9 = auto()
    KEY0 = auto()

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()

    ESCAPE = auto()

    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    F21 = auto()
    F22 = auto()
    F23 = auto()
    F24 = auto()

    SNAPSHOT = auto()
    SCROLL = auto()
    PAUSE = auto()

    INSERT = auto()
    HOME = auto()
    DELETE = auto()
    END = auto()
    PAGE_DOWN = auto()
    PAGE_UP = auto()

    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()

    BACK = auto()
    RETURN = auto()
    SPACE = auto()

    COMPOSE = auto()

    CARET = auto()

    NUMLOCK = auto()
    NUMPAD0 = auto()
    NUMPAD1 = auto()
    NUMPAD2 = auto()
    NUMPAD3 = auto()
    NUMPAD4 = auto()
    NUMPAD5 = auto()
    NUMPAD6 = auto()
    NUMPAD7 = auto()
    NUMPAD8 = auto()
    NUMPAD9 = auto()
    NUMPAD_ADD = auto()
    NUMPAD_DIVIDE = auto()
    NUMPAD_DECIMAL = auto()
    NUMPAD_COMMA = auto()
    NUMPAD_ENTER = auto()
    NUMPAD_EQUALS = auto()
    NUMPAD_MULTIPLY = auto()
    NUMPAD_SUBTRACT = auto()

    ABNT_C1 = auto()
    ABNT_C2 = auto()
    APOSTROPHE = auto()
    APPS = auto()
    ASTERISK = auto()
    AT = auto()
    AX = auto()
    BACKSLASH = auto()
    CALCULATOR = auto()
    CAPITAL = auto()
    COLON = auto()
    COMMA = auto()
    CONVERT = auto()
    EQUALS = auto()
    GRAVE = auto()
    KANA = auto()
    KANJI = auto()
    L_ALT = auto()
    L_BRACKET = auto()
    L_CONTROL = auto()
    L_SHIFT = auto()
    L_WIN = auto()
    MAIL = auto()
    MEDIA_SELECT = auto()
    MEDIA_STOP = auto()
    MINUS = auto()
    MUTE = auto()
    MY_COMPUTER = auto()
    NAVIGATE_FORWARD = auto()
    NAVIGATE_BACKWARD = auto()
    NEXT_TRACK = auto()
    NO_CONVERT = auto()
    OEM102 = auto()
    PERIOD = auto()
    PLAY_PAUSE = auto()
    PLUS = auto()
    POWER = auto()
    PREV_TRACK = auto()
    R_ALT = auto()
    R_BRACKET = auto()
    R_CONTROL = auto()
    R_SHIFT = auto()
    R_WIN = auto()
    SEMICOLON = auto()
    SLASH = auto()
    SLEEP = auto()
    STOP = auto()
    SYSRQ = auto()
    TAB = auto()
    UNDERLINE = auto()
    UNLABELED = auto()
    VOLUME_DOWN = auto()
    VOLUME_UP = auto()
    WAKE = auto()
    WEB_BACK = auto()
    WEB_FAVORITES = auto()
    WEB_FORWARD = auto()
    WEB_HOME = auto()
    WEB_REFRESH = auto()
    WEB_SEARCH = auto()
    WEB_STOP = auto()
    YEN = auto()
    COPY = auto()
    PASTE = auto()
    CUT = auto()


class Event:
    """Base class of all events."""

    __slots__ = ()


@dataclass(frozen=True)
class ProgramTermination(Event):
    """The program is about to quit."""


@dataclass(frozen=True)
class WindowResized(Event):
    new_size: tuple[int, int]


@dataclass(frozen=True)
class WindowMoved(Event):
    new_position: tuple[int, int]


@dataclass(frozen=True)
class WindowGainedFocus(Event):
    pass


@dataclass(frozen=True)
class WindowLostFocus(Event):
    pass


@dataclass(frozen=True)
class CursorEnteredWindow(Event):
    pass


@dataclass(frozen=True)
class CursorLeftWindow(Event):
    pass


@dataclass(frozen=True)
class ControllerAxis(Event):
    axis_id: int
    value: float


@dataclass(frozen=True)
class ScrollStart(Event):
    delta: ScrollDelta


@dataclass(frozen=True)
class ScrollContinue(Event):
    delta: ScrollDelta


@dataclass(frozen=True)
class ScrollEnd(Event):
    delta: ScrollDelta


@dataclass(frozen=True)
class MouseMoved(Event):
    """Cursor motion.

    ``position`` has y increasing upwards and x increasing to the right;
    ``normalized`` maps the top right of the window to (1, 1) and the
    bottom left to (-1, -1).
    """

    position: tuple[float, float]
    normalized: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _vec2(self.position, "position"))
        object.__setattr__(self, "normalized", _vec2(self.normalized, "normalized"))


@dataclass(frozen=True)
class MouseDown(Event):
    button: MouseButton


@dataclass(frozen=True)
class MouseUp(Event):
    button: MouseButton


@dataclass(frozen=True)
class KeyDown(Event):
    scan_code: int
    semantic_code: Optional[SemanticKeyCode] = None


@dataclass(frozen=True)
class ReceivedCharacter(Event):
    character: str

    def __post_init__(self) -> None:
        if not isinstance(self.character, str) or len(self.character) != 1:
            raise ValueError(f"expected a single character, got {self.character!r}")


@dataclass(frozen=True)
class KeyUp(Event):
    scan_code: int
    semantic_code: Optional[SemanticKeyCode] = None


@dataclass(frozen=True)
class RedrawRequested(Event):
    pass