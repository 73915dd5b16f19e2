"""Core rendering abstractions: start-up info, event collection and the frame loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Any, Callable, Optional, Protocol, Sequence, Union

from .events import Event, ProgramTermination


@dataclass
class CreateInfo:
    """Settings used to create the window and rendering backend."""

    default_size: tuple[int, int]
    window_id: str
    """On web backends this is the canvas id."""
    name: str
    vulkan_sdk_path: Optional[Union[str, PathLike]] = None


class EventCollector:
    """Buffers events between frames."""

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._quit_requested = False

    def push(self, event: Event) -> None:
        """Queue ``event`` for the next frame."""
        self._events.append(event)

    def pull_events(self) -> list[Event]:
        """Return and clear the queued events.

        If a quit was requested, a :class:`ProgramTermination` event is
        appended first.
        """
        if self._quit_requested:
            self._events.append(ProgramTermination())
        events, self._events = self._events, []
        return events

    def request_quit(self) -> None:
        """Ask the loop to stop after the current event."""
        self._quit_requested = True

    def quit_requested(self) -> bool:
        return self._quit_requested


class ControlFlow(Enum):
    """Whether the event loop keeps running."""

    CONTINUE = "continue"
    QUIT = "quit"


@dataclass(frozen=True)
class WindowEvent:
    """Either an input event, or (with no event) a request to run a frame."""

    event: Optional[Event] = None


@dataclass(frozen=True)
class Bindable:
    """A framebuffer that can be drawn to: a user framebuffer or the screen."""

    framebuffer: Optional[Any] = None

    @classmethod
    def user(cls, framebuffer: Any) -> "Bindable":
        if framebuffer is None:
            raise ValueError("a user framebuffer is required")
        return cls(framebuffer)

    @classmethod
    def screen(cls) -> "Bindable":
        return cls(None)

    @property
    def is_screen(self) -> bool:
        return self.framebuffer is None


@dataclass(frozen=True)
class DrawableTexture:
    """Something a mesh can be textured with: a texture or a framebuffer."""

    source: Any
    is_framebuffer: bool = False

    @classmethod
    def texture(cls, texture: Any) -> "DrawableTexture":
        return cls(texture, False)

    @classmethod
    def framebuffer(cls, framebuffer: Any) -> "DrawableTexture":
        return cls(framebuffer, True)


class Renderable(ABC):
    """User code that issues draw calls each frame."""

    @classmethod
    @abstractmethod
    def init(cls, context: Any) -> "Renderable":
        """Create the renderable, building its resources with ``context``."""

    @abstractmethod
    def render_frame(
        self, events: Sequence[Event], context: Any, delta_time: float
    ) -> None:
        """Draw one frame; ``delta_time`` is in seconds."""


class _EventLoop(Protocol):
    def run(self, handler: Callable[[WindowEvent], ControlFlow]) -> None: ...


class _Timer(Protocol):
    def elapsed(self) -> float: ...


@dataclass
class _LoopState:
    timer: _Timer
    collector: EventCollector = field(default_factory=EventCollector)
    flow: ControlFlow = ControlFlow.CONTINUE


def run_loop(
    renderable_cls: type,
    context: Any,
    event_loop: _EventLoop,
    timer_factory: Callable[[], _Timer],
) -> Renderable:
    """Initialise ``renderable_cls`` and drive it from ``event_loop``.

    Returns the renderable once the event loop stops.
    """
    renderer = renderable_cls.init(context.clone())
    state = _LoopState(timer=timer_factory())

    def handle(window_event: WindowEvent) -> ControlFlow:
        if window_event.event is not None:
            state.collector.push(window_event.event)
        else:
            delta_time = state.timer.elapsed()
            context.begin_render()
            renderer.render_frame(
                state.collector.pull_events(), context.clone(), delta_time
            )
            if context.did_quit():
                state.flow = ControlFlow.QUIT
            context.finish_render()
            state.timer = timer_factory()
        if state.collector.quit_requested():
            state.flow = ControlFlow.QUIT
        return state.flow

    event_loop.run(handle)
    return renderer