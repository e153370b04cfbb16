import math

from pytest import approx

from geokey import Coordinate


def test_coordinate_init():
    c = Coordinate(1., 0.)
    assert c.latitude == 1.
    assert c.longitude == 0.

    c = Coordinate('1.0', '0.0')
    assert c.latitude == 1.
    assert c.longitude == 0.

    # Out of range values are kept as-is
    c = Coordinate(91., 181.)
    assert c.to_float() == (91., 181.)


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(1., 1.) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(1., 0.) != Coordinate(0., 1.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(1., 0.)) == '<Coordinate(1.0, 0.0)>'


def test_coordinate_to_float():
    assert Coordinate(1., 0.).to_float() == (1.0, 0.0)


def test_coordinate_xyz():
    assert Coordinate(0., 0.).xyz == approx([1., 0., 0.])
    assert Coordinate(0., 90.).xyz == approx([0., 1., 0.], abs=1e-12)
    assert Coordinate(90., 0.).xyz == approx([0., 0., 1.], abs=1e-12)

    x, y, z = Coordinate(45., 45.).xyz
    assert math.sqrt(x ** 2 + y ** 2 + z ** 2) == approx(1.)
