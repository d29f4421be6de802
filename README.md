# sagengine

The core of a small real-time 3D engine, built on numpy. Matrices are 4x4 numpy arrays that use
the column-vector convention.

## What it provides

- **Scene graph** (`sagengine.scene`): each `SceneNode` owns its children. When you set a node's
  `local_transformation`, its world transformation is pushed down to the objects attached to it
  and to the objects of all its descendants. `attach_child` moves a node from one parent to
  another. `detach_child` and `detach` take a node out of the tree. `SceneManager.instance()` is a
  shared registry that holds `root_node`, `main_camera`, the registered renderable objects and the
  registered lights.
- **Moveable and renderable objects** (`sagengine.moveable`): `MoveableObject` has a
  `transformation` property. `Geometry` and `RenderableObject` are abstract bases: they define
  `draw()` and `render(view, view_projection, lights, pass_data)`. Every object is equal only to
  itself, because each one gets a unique id (`sagengine.identity.ComparableObject`).
- **Cameras and lights** (`sagengine.camera`): `Camera(aspect_ratio, fovy_deg)` builds a
  perspective `projection` with near plane 0.1 and far plane 100. Its `fovy` is given back in
  degrees. `Light.position` is the homogeneous world position. `DirectionalLight(center,
  fovy_deg, aspect)` has a `perspective` matrix and a `view()` that looks from the light towards
  `center`.
- **Matrix helpers** (`sagengine.linalg`): `identity`, `normalize`, `perspective`, `look_at`,
  `translate`, `scale`, `rotate` and `angle_axis_rotate`. Bad shapes, zero-length vectors and
  degenerate projections raise `InvalidArgumentException`.
- **Queued input events** (`sagengine.events`, `sagengine.dispatch`): `KeyDownEvent(delta_time,
  key)` and `MouseMoveEvent(delta_time, delta_x, delta_y)`. Each event gets an increasing
  `event_id()`. An `EventManager` puts dispatched events in a queue and hands them to its
  callbacks on the next `update()`. Events dispatched during an update wait for the update after
  it. `KeyboardEventManager.instance()` and `MouseEventManager.instance()` are shared managers.
- **Rendering pipeline** (`sagengine.render`): a `Renderer` calls each `RenderPass` in the order
  the passes were added. All passes in one frame share a new `RenderPassData`, which maps names to
  texture ids. The first id added under a name is kept, and an unknown name raises `KeyError`.
  After the passes, the renderer calls `swap_buffer()` on its `RenderWindow`.
- **Meshes** (`sagengine.meshes`): `cube_mesh(side_length=0.5)` and `sphere_mesh(radius,
  axis_subdivision, height_subdivision)` return a `MeshData`. It holds float32 `vertices`,
  `normals` and `tex_coords`, and uint32 triangle `elements`.
- **Player** (`sagengine.player`): a first-person controller that owns a camera on its own scene
  node. The W/S/A/D keys in `handle_key_down` move it forwards, backwards, left and right.
  `handle_mouse_move` turns it, and pitch is clamped just short of ±90°.
- **Files** (`sagengine.files`): `read_file` returns the text of a file. An unreadable file raises
  `FileHelperException`. `write_portable_pixmap` saves RGB bytes as a binary P6 image.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Moving an object through the scene graph:

```python
from sagengine import linalg
from sagengine.moveable import MoveableObject
from sagengine.scene import SceneManager

scene = SceneManager.instance()
node = scene.root_node.create_child()
obj = MoveableObject()
node.attach_object(obj)

node.local_transformation = linalg.translate(linalg.identity(), (0.0, 0.5, 0.0))
print(obj.transformation[:3, 3])  # [0.  0.5 0. ]
```

Steering a player with queued keyboard events:

```python
from sagengine.camera import Camera
from sagengine.dispatch import KeyboardEventManager
from sagengine.events import KeyDownEvent, KeyboardKey
from sagengine.player import Player

player = Player(Camera(1280 / 720, 70.0))
player.set_position((0.0, 1.0, 1.0))

keyboard = KeyboardEventManager.instance()
keyboard.add_event_callback(player.handle_key_down)

keyboard.dispatch_event(KeyDownEvent(0.016, KeyboardKey.W))
keyboard.update()  # the player moves forward
```

## What it does not do

This package does not open windows, create a graphics context, compile shaders or upload meshes
to a GPU. It has no materials, no ready-made render passes and no main loop or command. To put
frames on screen, subclass `RenderWindow` so that it presents frames, write `RenderPass`
subclasses (and `RenderableObject` subclasses) that do the drawing with a graphics library of your
choice, and pass them to a `Renderer`.