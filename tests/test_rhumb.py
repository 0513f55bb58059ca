import math

from pytest import approx

from geomeasure import Coordinate
from geomeasure.rhumb import *

from tests.functions import assert_coordinates_equal

RADIUS = 6378137.
ONE_DEGREE = RADIUS * math.pi / 180


def test_calculate_rhumb_bearing():
    assert calculate_rhumb_bearing(Coordinate(0., 0.), Coordinate(1., 0.)) == approx(90.)
    assert calculate_rhumb_bearing(Coordinate(0., 0.), Coordinate(-1., 0.)) == approx(270.)
    assert calculate_rhumb_bearing(Coordinate(0., 0.), Coordinate(0., -1.)) == approx(180.)


def test_rhumb_bearing():
    origin = Coordinate(0., 0.)
    assert rhumb_bearing(origin, Coordinate(0., 1.)) == approx(0.)
    assert rhumb_bearing(origin, Coordinate(1., 0.)) == approx(90.)
    assert rhumb_bearing(origin, Coordinate(0., -1.)) == approx(180.)
    assert rhumb_bearing(origin, Coordinate(-1., 0.)) == approx(-90.)

    # Near the equator a rhumb line to a diagonal point is close to 45 degrees
    assert rhumb_bearing(origin, Coordinate(0.001, 0.001)) == approx(45., abs=1e-4)

    # Coincident points
    assert rhumb_bearing(origin, Coordinate(0., 0.)) == 0.


def test_rhumb_bearing_final():
    start, end = Coordinate(0., 0.), Coordinate(0., 1.)
    assert rhumb_bearing(start, end, final=True) == approx(180.)

    start, end = Coordinate(0., 0.), Coordinate(1., 0.)
    assert rhumb_bearing(start, end, final=True) == approx(-90.)


def test_rhumb_bearing_antimeridian():
    # Shorter path crosses the antimeridian heading east
    assert rhumb_bearing(Coordinate(179., 0.), Coordinate(-179., 0.)) == approx(90.)
    assert rhumb_bearing(Coordinate(-179., 0.), Coordinate(179., 0.)) == approx(-90.)


def test_rhumb_destination():
    origin = Coordinate(0., 0.)
    result = rhumb_destination(origin, ONE_DEGREE, 0., RADIUS)

    # Written in place
    assert result is origin
    assert_coordinates_equal(result, Coordinate(0., 1.), abs_tol=1e-9)

    result = rhumb_destination(Coordinate(0., 0.), ONE_DEGREE, 180., RADIUS)
    assert_coordinates_equal(result, Coordinate(0., -1.), abs_tol=1e-9)


def test_rhumb_destination_east_west():
    # Delta psi ~ 0; falls back to cos(latitude)
    result = rhumb_destination(Coordinate(0., 0.), ONE_DEGREE, 90., RADIUS)
    assert_coordinates_equal(result, Coordinate(1., 0.), abs_tol=1e-9)

    result = rhumb_destination(Coordinate(0., 60.), ONE_DEGREE, -90., RADIUS)
    assert result.x == approx(-1. / math.cos(math.radians(60.)), abs=1e-9)
    assert result.y == approx(60., abs=1e-9)


def test_rhumb_destination_normalizes_longitude():
    result = rhumb_destination(Coordinate(179.5, 0.), ONE_DEGREE, 90., RADIUS)
    assert_coordinates_equal(result, Coordinate(-179.5, 0.), abs_tol=1e-9)


def test_rhumb_destination_crosses_pole():
    result = rhumb_destination(Coordinate(0., 89.), 2 * ONE_DEGREE, 0., RADIUS)
    assert result.y == approx(89., abs=1e-9)
    assert result.x == approx(0., abs=1e-9)

    result = rhumb_destination(Coordinate(0., -89.), 2 * ONE_DEGREE, 180., RADIUS)
    assert result.y == approx(-89., abs=1e-9)


def test_rhumb_bearing_destination_agree():
    start, end = Coordinate(10., 20.), Coordinate(12., 23.)
    bearing = rhumb_bearing(start, end)

    # Rhumb distance, the length of the constant-bearing path
    phi1, phi2 = math.radians(start.y), math.radians(end.y)
    d_psi = math.log(math.tan(phi2 / 2 + math.pi / 4) / math.tan(phi1 / 2 + math.pi / 4))
    q = (phi2 - phi1) / d_psi
    d_lambda = math.radians(end.x - start.x)
    distance = math.sqrt((phi2 - phi1) ** 2 + q ** 2 * d_lambda ** 2) * RADIUS

    result = rhumb_destination(Coordinate(start), distance, bearing, RADIUS)
    assert_coordinates_equal(result, end, abs_tol=1e-9)
