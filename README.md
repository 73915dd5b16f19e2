# sukakpak

This is the core of a small rendering framework, written as a plain Python
library. It holds the parts that need no GPU:

- asset storage
- deferred resource freeing
- mesh construction
- input events
- shader metadata

It also has a headless backend, so a game loop can run without a window.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `sukakpak.asset_manager`

`AssetManager` stores values under `AssetHandle`s. A handle records an index and a generation. Once a value is removed, its old handle never matches a value stored later in the same slot.

- `insert(data)` stores a value and returns its handle.
- `get(handle)` returns the value, or `None` if the handle is not valid.
- `replace(handle, data)` and `update(handle, func)` change a stored value.
- `remove(handle)` returns the removed value.
- `replace`, `update` and `remove` raise `AssetNotFoundError` (a `KeyError`) when the handle is not valid.
- `drain()` removes everything and returns the `(handle, value)` pairs.
- `items()` yields `(handle, value)` pairs.
- Iterating the manager yields handles.
- `len()` and `in` are supported.

### `sukakpak.free_list`

`FreeList` defers freeing an item until no render pass uses it.

- `push(item, renderpass)` marks an item as used by a pass.
- `try_free(item)` asks for the item to be freed.
- `finish_renderpass(pass_id)` drops that pass's usage record. It returns the set of requested items that no other pass still uses.
- `is_used(item)` reports whether any pass uses the item.

### `sukakpak.vertex`

- `VertexComponent` has the members `VEC1_F32` to `VEC4_F32`, each with `num_components()` and `size()` in bytes.
- `VertexLayout` is an ordered list of components. `stride()` returns its total size.

### `sukakpak.shader_types`

This module describes shader input types. Each type can be converted to and from plain JSON-compatible data with `to_data()` and `from_data()`.

- `Scalar` has the members `F32` and `U32`.
- `ShaderKind` names the shape of a type.
- `ShaderType` is a scalar, vector, 4x4 matrix or struct. It has `size()`.
- `VertexField` is one vertex input field.
- `VertexInput` is a binding together with its fields.

### `sukakpak.events`

- `MouseButton` has the constants `LEFT`, `RIGHT` and `MIDDLE`. `MouseButton.other(code)` makes a button from a 16-bit code.
- `ScrollDelta` holds a scroll amount, read with `x()` and `y()`.
- `SemanticKeyCode` is an enum of keys.
- Each event is a frozen dataclass subclass of `Event`:
  - `ProgramTermination`, `WindowResized`, `WindowMoved`, `WindowGainedFocus`, `WindowLostFocus`
  - `CursorEnteredWindow`, `CursorLeftWindow`, `ControllerAxis`
  - `ScrollStart`, `ScrollContinue`, `ScrollEnd`
  - `MouseMoved`, `MouseDown`, `MouseUp`
  - `KeyDown`, `KeyUp`, `ReceivedCharacter`, `RedrawRequested`

### `sukakpak.mesh`

`Mesh` holds packed vertex bytes, a list of indices and a `VertexLayout`. Every vertex is a position, a texture coordinate and a normal, stored as eight native-order 32-bit floats.

- `Mesh.new_triangle()`, `Mesh.new_plane()` and `Mesh.new_cube()` build fixed shapes.
- `Mesh.from_obj(path)` reads Wavefront OBJ data from a file; `Mesh.from_obj_lines(lines)` reads it from lines.
  - Only the first object is read, and its faces are split into triangles.
  - It raises `ObjParseError` if the data is malformed, has no faces, or lacks texture coordinates or normals.
- `num_vertices()` returns the number of indices.
- `EasyMesh` and `Vertex` build a mesh from vertex records. `EasyMesh.to_mesh()` packs them.

### `sukakpak.context`

This module holds the framework types:

- `CreateInfo` holds the start-up settings.
- `EventCollector` queues events between frames.
  - `pull_events()` returns the queue and clears it.
  - After `request_quit()`, `pull_events()` adds a `ProgramTermination` event to what it returns.
- `ControlFlow` and `WindowEvent` are the values passed to and returned from an event loop.
- `Bindable.user(fb)` and `Bindable.screen()` name the framebuffer to draw into.
- `DrawableTexture.texture(t)` and `DrawableTexture.framebuffer(fb)` name what a mesh is textured with.
- `Renderable` is an abstract base class with two methods:
  - `init(context)` is a classmethod that builds resources.
  - `render_frame(events, context, delta_time)` draws one frame. `delta_time` is in seconds.
- `run_loop(renderable_cls, context, event_loop, timer_factory)` initialises a renderable and drives it from an event loop. It returns the renderable when the loop stops.

### `sukakpak.stub`

This module is a headless backend.

- `StubContext` accepts every operation and draws nothing. It records what it was asked to do in `frames_rendered`, `draw_calls`, `bound_framebuffer` and `loaded_shaders`. Its clones share that record and the quit flag.
- `StubEventLoop` requests frames until it is told to quit.
- `Timer` measures elapsed seconds.
- `run(renderable_cls, create_info)` runs a renderable on this backend and returns it.

### `sukakpak.vk_shader` and `sukakpak.wgl_shader`

These modules describe shaders that are already compiled. Both raise `ShaderFormatError` on malformed data.

- `vk_shader.Shader` holds:
  - SPIR-V words
  - a `PushConstant`
  - a `VertexInput`
  - `Texture` and `Sampler` bindings
  - the entry point names

  Its file methods are:
  - `write_to_disk` writes JSON with the extension `.ass_spv`.
  - `read_from_disk` reads that JSON back.
  - `write_vertex_to_disk` and `write_fragment_to_disk` write raw `.spv` files.
- `wgl_shader.Shader` holds:
  - GLSL source for the vertex and fragment stages
  - the texture and uniform names
  - the vertex input

  `write_to_disk` and `read_from_disk` use the extension `.ass_glsl`.

## Example

```python
from sukakpak.asset_manager import AssetManager
from sukakpak.free_list import FreeList
from sukakpak.mesh import Mesh

manager = AssetManager()
one = manager.insert(1)
manager.update(one, lambda value: value + 1)
assert manager.get(one) == 2

frees = FreeList()
frees.push(7, 0)
frees.try_free(7)
assert frees.finish_renderpass(0) == {7}

cube = Mesh.new_cube()
print(cube.num_vertices())  # 36 indices
```

To write a game, subclass `Renderable`. Build resources in `init` and issue draw calls in `render_frame`. `sukakpak.stub.run(MyGame, create_info)` runs the game on the headless backend. When the game calls `context.quit()`, that loop ends after the current frame.

## What this package does not do

- It has no GPU or windowing backend. The only context provided is `StubContext`, which draws nothing.
- It cannot compile shaders from source. `vk_shader` and `wgl_shader` only hold, serialize and write shader data that has already been compiled.
- It provides no command-line tools.