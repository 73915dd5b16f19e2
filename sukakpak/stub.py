"""A backend that draws nothing; useful for tests and headless runs."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .context import (
    Bindable,
    ControlFlow,
    CreateInfo,
    DrawableTexture,
    Renderable,
    WindowEvent,
    run_loop,
)
from .mesh import Mesh

_SCREEN_SIZE = (100, 100)


class StubEventLoop:
    """Requests a frame repeatedly until told to quit."""

    def __init__(self, screen_size: tuple[int, int]) -> None:
        self.screen_size = screen_size

    def run(self, handler: Callable[[WindowEvent], ControlFlow]) -> None:
        while handler(WindowEvent()) is not ControlFlow.QUIT:
            pass


@dataclass(eq=False)
class StubMesh:
    """Mesh handle of the stub backend."""

    texture: Optional[DrawableTexture] = None


@dataclass(eq=False)
class StubFramebuffer:
    """Framebuffer handle of the stub backend."""


@dataclass(eq=False)
class StubTexture:
    """Texture handle of the stub backend."""


class Timer:
    """Measures seconds elapsed since creation."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        return time.perf_counter() - self._start


@dataclass
class _StubState:
    """Bookkeeping shared by a context and its clones."""

    bound_framebuffer: Any = None
    shader_bindings: dict = field(default_factory=dict)
    loaded_shaders: dict = field(default_factory=dict)
    frame_active: bool = False
    frames_rendered: int = 0
    draw_calls: int = 0
    pushed_bytes: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)


class StubContext:
    """Context whose operations all succeed without drawing anything.

    It records what was asked of it; clones share that record and the
    quit flag.
    """

    def __init__(self, create_info: Optional[CreateInfo] = None) -> None:
        self.create_info = create_info
        self._quit = threading.Event()
        self._state = _StubState(bound_framebuffer=Bindable.screen())

    @property
    def frames_rendered(self) -> int:
        return self._state.frames_rendered

    @property
    def draw_calls(self) -> int:
        return self._state.draw_calls

    @property
    def bound_framebuffer(self) -> Bindable:
        return self._state.bound_framebuffer

    @property
    def loaded_shaders(self) -> dict:
        return dict(self._state.loaded_shaders)

    def begin_render(self) -> None:
        with self._state.lock:
            self._state.frame_active = True

    def finish_render(self) -> None:
        with self._state.lock:
            self._state.frame_active = False
            self._state.frames_rendered += 1
            self._state.bound_framebuffer = Bindable.screen()

    def build_mesh(self, mesh: Mesh, texture: DrawableTexture) -> StubMesh:
        return StubMesh(texture=texture)

    def bind_texture(self, mesh: StubMesh, texture: DrawableTexture) -> None:
        mesh.texture = texture

    def build_texture(self, image: Any) -> StubTexture:
        return StubTexture()

    def draw_mesh(self, push: bytes, mesh: StubMesh) -> None:
        with self._state.lock:
            self._state.draw_calls += 1
            self._state.pushed_bytes += len(push)

    def build_framebuffer(self, resolution: tuple[int, int]) -> StubFramebuffer:
        return StubFramebuffer()

    def bind_shader(self, framebuffer: Bindable, shader: str) -> None:
        with self._state.lock:
            self._state.shader_bindings[id(framebuffer)] = (framebuffer, shader)

    def bind_framebuffer(self, framebuffer: Bindable) -> None:
        with self._state.lock:
            self._state.bound_framebuffer = framebuffer

    def get_screen_size(self) -> tuple[int, int]:
        return _SCREEN_SIZE

    def load_shader(self, shader: str, shader_name: str) -> None:
        with self._state.lock:
            self._state.loaded_shaders[shader_name] = shader

    def quit(self) -> None:
        """Quit once the current frame finishes."""
        self._quit.set()

    def did_quit(self) -> bool:
        return self._quit.is_set()

    def check_state(self) -> None:
        """Raise if the recorded state is inconsistent."""
        with self._state.lock:
            if not isinstance(self._state.bound_framebuffer, Bindable):
                raise TypeError(
                    f"bound framebuffer is not bindable: "
                    f"{self._state.bound_framebuffer!r}"
                )
            if self._state.draw_calls < 0 or self._state.frames_rendered < 0:
                raise RuntimeError("negative render counters")

    def clone(self) -> "StubContext":
        copy = StubContext(self.create_info)
        copy._quit = self._quit
        copy._state = self._state
        return copy


def run(renderable_cls: type, create_info: CreateInfo) -> Renderable:
    """Run ``renderable_cls`` on the stub backend until it quits."""
    event_loop = StubEventLoop(create_info.default_size)
    context = StubContext(create_info)
    return run_loop(renderable_cls, context, event_loop, Timer)