import numpy as np
import pytest

from sagengine.errors import InvalidArgumentException
from sagengine.meshes import MeshData, cube_mesh, sphere_mesh


def test_cube_counts():
    mesh = cube_mesh()
    assert mesh.vertex_count == 24
    assert mesh.element_count == 36
    assert mesh.normals.shape == (24, 3)
    assert mesh.tex_coords.shape == (24, 2)


def test_cube_default_side_length():
    mesh = cube_mesh()
    assert np.allclose(np.abs(mesh.vertices), 0.5)


def test_cube_faces_lie_on_their_planes():
    side = 2.0
    mesh = cube_mesh(side)
    for vertex, normal in zip(mesh.vertices, mesh.normals):
        assert float(np.dot(vertex, normal)) == pytest.approx(side)


def test_cube_normals_are_unit():
    mesh = cube_mesh()
    assert np.allclose(np.linalg.norm(mesh.normals, axis=1), 1.0)


def test_cube_elements_index_their_own_face():
    mesh = cube_mesh()
    for face, triangle_pair in enumerate(mesh.elements.reshape(6, 6)):
        assert set(triangle_pair.tolist()) == set(range(face * 4, face * 4 + 4))


def test_cube_triangles_reshape():
    mesh = cube_mesh()
    assert mesh.triangles.shape == (12, 3)
    assert mesh.triangles[0].tolist() == [0, 1, 2]


@pytest.mark.parametrize("axis,height", [(20, 20), (3, 2), (8, 5)])
def test_sphere_counts(axis, height):
    mesh = sphere_mesh(1.0, axis, height)
    assert mesh.vertex_count == (axis + 1) * (height + 1)
    assert mesh.element_count == axis * 2 * (height - 1) * 3


def test_sphere_vertices_on_radius():
    radius = 0.05
    mesh = sphere_mesh(radius, 20, 20)
    assert np.allclose(np.linalg.norm(mesh.vertices, axis=1), radius, atol=1e-6)


def test_sphere_normals_match_vertices():
    radius = 3.0
    mesh = sphere_mesh(radius, 7, 9)
    assert np.allclose(mesh.normals * radius, mesh.vertices, atol=1e-5)
    assert np.allclose(np.linalg.norm(mesh.normals, axis=1), 1.0, atol=1e-6)


def test_sphere_tex_coords_in_unit_range():
    mesh = sphere_mesh(1.0, 6, 4)
    assert mesh.tex_coords.min() == pytest.approx(0.0)
    assert mesh.tex_coords.max() == pytest.approx(1.0)


def test_sphere_elements_in_range():
    mesh = sphere_mesh(1.0, 10, 6)
    assert int(mesh.elements.max()) < mesh.vertex_count
    assert int(mesh.elements.min()) >= 0


def test_sphere_first_triangle_fans_from_pole():
    height = 4
    mesh = sphere_mesh(1.0, 5, height)
    assert mesh.triangles[0].tolist() == [0, 1, height + 2]


@pytest.mark.parametrize("axis,height", [(0, 5), (5, 1), (5, 0)])
def test_sphere_rejects_bad_subdivision(axis, height):
    with pytest.raises(InvalidArgumentException):
        sphere_mesh(1.0, axis, height)


def test_mesh_data_is_frozen():
    mesh = cube_mesh()
    with pytest.raises(AttributeError):
        mesh.vertices = np.zeros((1, 3))
    assert isinstance(mesh, MeshData)