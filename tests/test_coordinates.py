import pytest

from geomeasure import Coordinate


def test_coordinate_init():
    c = Coordinate(0., 1.)
    assert c.x == 0.
    assert c.y == 1.

    c = Coordinate('0.0', '1.0')
    assert c.x == 0.
    assert c.y == 1.

    c = Coordinate((2, 3))
    assert c.to_float() == (2., 3.)

    # Copy constructor
    original = Coordinate(4., 5.)
    c = Coordinate(original)
    assert c == original
    assert c is not original

    # Ranges are not bounded
    assert Coordinate(361., 181.).to_float() == (361., 181.)

    with pytest.raises(TypeError):
        Coordinate(1.)

    with pytest.raises(TypeError):
        Coordinate((1., 2., 3.))


def test_coordinate_mutation():
    c = Coordinate(0., 0.)
    assert c.set(1., 2.) is c
    assert c.to_float() == (1., 2.)

    c.x = 3.
    c.latitude = 4.
    assert c.longitude == 3.
    assert c.y == 4.


def test_coordinate_copy():
    c = Coordinate(1., 2.)
    copied = c.copy()
    copied.x = 10.
    assert c.x == 1.
    assert copied == Coordinate(10., 2.)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_unhashable():
    with pytest.raises(TypeError):
        hash(Coordinate(0., 0.))


def test_coordinate_repr():
    assert repr(Coordinate(0., 1.)) == '<Coordinate(0.0, 1.0)>'


def test_coordinate_to_float():
    assert Coordinate(0., 1.).to_float() == (0.0, 1.0)
    assert Coordinate(0., 1.).to_float(reverse=True) == (1.0, 0.0)

