import numpy as np
import pytest

from sagengine import linalg
from sagengine.camera import Light
from sagengine.errors import InvalidArgumentException
from sagengine.moveable import MoveableObject
from sagengine.scene import SceneManager, SceneNode


def _shift(x, y, z):
    return linalg.translate(linalg.identity(), (x, y, z))


def test_create_child_links_both_ways():
    root = SceneNode()
    child = root.create_child()
    assert child.parent is root
    assert root.children == (child,)


def test_child_of_root_world_is_local():
    root = SceneNode()
    a = root.create_child()
    a.local_transformation = _shift(1, 0, 0)
    assert np.allclose(a.world_transformation(), a.local_transformation)


def test_nested_world_composes_parents():
    root = SceneNode()
    a = root.create_child()
    b = a.create_child()
    a.local_transformation = linalg.rotate(linalg.identity(), 0.5, (0, 1, 0))
    b.local_transformation = _shift(0, 2, 0)
    assert np.allclose(b.world_transformation(), a.local_transformation @ b.local_transformation)


def test_root_world_transformation_raises():
    with pytest.raises(InvalidArgumentException):
        SceneNode().world_transformation()


def test_attached_objects_follow_node_and_ancestors():
    root = SceneNode()
    a = root.create_child()
    b = a.create_child()
    obj = MoveableObject()
    b.attach_object(obj)
    b.local_transformation = _shift(0, 1, 0)
    a.local_transformation = _shift(3, 0, 0)
    assert np.allclose(obj.transformation, b.world_transformation())


def test_removed_object_no_longer_moves():
    root = SceneNode()
    a = root.create_child()
    obj = MoveableObject()
    a.attach_object(obj)
    a.remove_object(obj)
    a.local_transformation = _shift(1, 1, 1)
    assert np.allclose(obj.transformation, np.eye(4))
    assert a.objects == ()


def test_attach_child_reparents():
    root = SceneNode()
    a = root.create_child()
    c = root.create_child()
    node = a.create_child()
    c.attach_child(node)
    assert node.parent is c
    assert node not in a.children
    assert c.children == (node,)


def test_attach_orphan_is_ignored():
    root = SceneNode()
    orphan = SceneNode()
    root.attach_child(orphan)
    assert root.children == ()


def test_detach_removes_node_and_makes_it_unusable():
    root = SceneNode()
    a = root.create_child()
    b = a.create_child()
    b.detach()
    assert a.children == ()
    assert b.parent is None
    with pytest.raises(InvalidArgumentException):
        b.world_transformation()


def test_bad_local_shape_raises():
    node = SceneNode().create_child()
    with pytest.raises(InvalidArgumentException):
        node.local_transformation = np.eye(2)


def test_manager_singleton_shares_state():
    first = SceneManager.instance()
    second = SceneManager.instance()
    light = Light()
    first.register_light(light)
    try:
        assert second.lights[-1] is light
    finally:
        first.deregister_light(light)
    assert light not in second.lights


def test_manager_registers_and_deregisters():
    manager = SceneManager()
    obj = MoveableObject()
    other = MoveableObject()
    manager.register_renderable(obj)
    manager.register_renderable(other)
    manager.register_renderable(obj)
    manager.deregister_renderable(obj)
    assert manager.renderable_objects == (other,)


def test_manager_lights_in_order():
    manager = SceneManager()
    first, second = Light(), Light()
    manager.register_light(first)
    manager.register_light(second)
    assert manager.lights[-1] is second
    manager.deregister_light(first)
    assert manager.lights == (second,)


def test_manager_root_supports_children():
    manager = SceneManager()
    child = manager.root_node.create_child()
    assert child.parent is manager.root_node