"""Tests for shape records and their metadata (names, descriptions, fields)."""

import dataclasses

import pytest

import sdf2d
import sdf3d
from sdf3d import SHAPES, Sphere, Vec2, Vec3, Vec4, shape_info


DESCRIPTIONS = {
    "Circle": "2D circle",
    "Rect": "Axis-aligned rectangle",
    "Sphere": "3D sphere",
    "Cuboid": "Axis-aligned box",
    "Cylinder": "Finite cylinder aligned with the Y axis",
    "Torus": "Torus aligned with the Y axis",
    "Union": "Take the union of a set of shapes",
    "Intersection": "Take the intersection of a set of shapes",
    "Inverse": "Computes the inverse of a shape",
    "Difference": "Take the difference of two shapes",
    "Round": "Uniformly round (or offset) a shape",
    "Onion": "Form a shell of constant thickness around a shape",
    "Repeat": "Repeat a shape with the given periodicity",
    "Twist": "Twist a shape around the Y axis",
    "Move": "Move a shape",
    "Scale": "Non-uniform scaling",
}


class TestRegistry:
    def test_every_shape_is_registered(self):
        assert set(DESCRIPTIONS) <= set(SHAPES)

    @pytest.mark.parametrize("name, doc", sorted(DESCRIPTIONS.items()))
    def test_description(self, name, doc):
        assert shape_info(name).doc == doc
        assert shape_info(SHAPES[name]).name == name

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            shape_info("Dodecahedron")

    def test_field_docs(self):
        info = shape_info(sdf3d.Cylinder)
        assert [f.name for f in info.fields] == ["center", "radius", "half_height"]
        assert info.fields[2].doc == "Half-height of the cylinder"
        assert all(f.doc for f in info.fields)

    def test_every_field_is_documented(self):
        for cls in SHAPES.values():
            assert all(f.doc for f in shape_info(cls).fields), cls.__name__

    def test_packages_share_combinators(self):
        assert sdf2d.Union is sdf3d.Union
        assert sdf2d.Move is sdf3d.Move


class TestRecords:
    def test_records_are_frozen(self):
        s = Sphere(center=Vec3(), radius=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.radius = 2.0

    def test_replace_gives_new_record(self):
        s = Sphere(center=Vec3(), radius=1.0)
        t = dataclasses.replace(s, radius=2.0)
        assert s.radius == 1.0 and t.radius == 2.0

    def test_vectors(self):
        assert tuple(Vec2(1.0, 2.0)) == (1.0, 2.0)
        assert tuple(Vec3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)
        assert tuple(Vec4(1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0, 4.0)
        assert Vec3() == Vec3(0.0, 0.0, 0.0)
