import pytest

from geokey import BoundingBox, Coordinate


def test_bounding_box_init():
    box = BoundingBox(1., -2., -1., 2.)
    assert box.max_lat == 1.
    assert box.min_lon == -2.
    assert box.min_lat == -1.
    assert box.max_lon == 2.


def test_bounding_box_immutable():
    box = BoundingBox(1., -2., -1., 2.)
    with pytest.raises(AttributeError):
        box.max_lat = 5.

    with pytest.raises(AttributeError):
        box.min_lon = 5.


def test_bounding_box_eq():
    assert BoundingBox(1., -2., -1., 2.) == BoundingBox(1., -2., -1., 2.)
    assert BoundingBox(1., -2., -1., 2.) != BoundingBox(1., -2., -1., 3.)
    assert BoundingBox(1., -2., -1., 2.) != (1., -2., -1., 2.)


def test_bounding_box_hash():
    boxes = {
        BoundingBox(1., -2., -1., 2.),
        BoundingBox(1., -2., -1., 2.),
        BoundingBox(2., -2., -1., 2.),
    }
    assert len(boxes) == 2


def test_bounding_box_repr():
    assert repr(BoundingBox(1., -2., -1., 2.)) == \
        '<BoundingBox max_lat=1.0, min_lon=-2.0, min_lat=-1.0, max_lon=2.0>'


def test_bounding_box_bounds():
    box = BoundingBox(1., -2., -1., 2.)
    assert box.bounds == (-2., -1., 2., 1.)
    assert box.nw_bound == Coordinate(1., -2.)
    assert box.se_bound == Coordinate(-1., 2.)


def test_bounding_box_contains():
    box = BoundingBox(1., -2., -1., 2.)
    assert box.contains(Coordinate(0., 0.))
    assert box.contains(Coordinate(1., 2.))
    assert not box.contains(Coordinate(1.5, 0.))
    assert not box.contains(Coordinate(0., -3.))

    # Wrapped longitudes are compared as stored
    wrapped = BoundingBox(1., 179., -1., 181.)
    assert wrapped.contains(Coordinate(0., 180.5))
    assert not wrapped.contains(Coordinate(0., -179.5))
