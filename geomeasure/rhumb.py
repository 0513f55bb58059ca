"""
Rhumb line (constant compass bearing) calculations on a sphere.

Adapted from the rhumb functions in turf.js / Chris Veness' movable-type scripts.
"""

__all__ = [
    'calculate_rhumb_bearing', 'rhumb_bearing', 'rhumb_destination'
]

import math

from geomeasure._const import RHUMB_EPSILON
from geomeasure.coordinates import Coordinate
from geomeasure.utils.functions import divide, to_degree, to_radian
from geomeasure.utils.logging import LOGGER


def _delta_psi(phi1: float, phi2: float) -> float:
    """
    Difference in projected (Mercator) latitude between two latitudes, in radians.

    Latitudes at or past a pole produce infinite or nan values rather than raising.
    """
    ratio = divide(
        math.tan(phi2 / 2 + math.pi / 4),
        math.tan(phi1 / 2 + math.pi / 4)
    )
    if ratio == 0:
        return -math.inf
    if not ratio > 0:
        return math.nan
    return math.log(ratio)


def calculate_rhumb_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the rhumb bearing from start to end

    Args:
        start:
            The start point Coordinate

        end:
            The finish point Coordinate

    Returns:
        (float) the bearing in degrees, in the range [0, 360)
    """
    phi1 = to_radian(start.y)
    phi2 = to_radian(end.y)
    d_lambda = to_radian(end.x - start.x)

    # Over 180 degrees, take the shorter rhumb line across the antimeridian
    if d_lambda > math.pi:
        d_lambda -= 2 * math.pi
    if d_lambda < -math.pi:
        d_lambda += 2 * math.pi

    theta = math.atan2(d_lambda, _delta_psi(phi1, phi2))

    return (to_degree(theta) + 360) % 360


def rhumb_bearing(start: Coordinate, end: Coordinate, final: bool = False) -> float:
    """
    Calculate the rhumb bearing between two coordinates, in degrees from north.

    Args:
        start:
            The start point Coordinate

        end:
            The finish point Coordinate

        final: (bool)
            (Default False) If True, calculates the bearing arriving at end (the start and
            end points are swapped) rather than the bearing departing start

    Returns:
        (float) the bearing in degrees, in the range (-180, 180]
    """
    if final:
        bear360 = calculate_rhumb_bearing(end, start)
    else:
        bear360 = calculate_rhumb_bearing(start, end)

    return bear360 - 360 if bear360 > 180 else bear360


def rhumb_destination(
    origin: Coordinate,
    distance: float,
    bearing: float,
    radius: float,
) -> Coordinate:
    """
    Travels a distance along a rhumb line of constant bearing.

    Writes the destination into origin and returns it; callers needing the origin
    preserved must pass a copy.

    Args:
        origin: (Coordinate)
            The starting location. Overwritten with the destination.

        distance: (float)
            The distance of travel, in the same units as radius

        bearing: (float)
            The bearing of travel, in degrees clockwise from north

        radius: (float)
            The sphere radius

    Returns:
        (Coordinate) origin, moved to the destination
    """
    delta = distance / radius  # angular distance
    lambda1 = origin.x * math.pi / 180  # not normalised to +/- pi
    phi1 = to_radian(origin.y)
    theta = to_radian(bearing)

    d_phi = delta * math.cos(theta)
    phi2 = phi1 + d_phi

    # Past a pole; reflect back into range
    if abs(phi2) > math.pi / 2:
        LOGGER.debug('Rhumb line crosses a pole; reflecting latitude %s', to_degree(phi2))
        phi2 = math.pi - phi2 if phi2 > 0 else -math.pi - phi2

    d_psi = _delta_psi(phi1, phi2)

    # E-W course becomes ill-conditioned with 0/0
    q = divide(d_phi, d_psi) if abs(d_psi) > RHUMB_EPSILON else math.cos(phi1)
    d_lambda = divide(delta * math.sin(theta), q)
    lambda2 = lambda1 + d_lambda

    origin.x = ((lambda2 * 180 / math.pi) + 540) % 360 - 180
    origin.y = phi2 * 180 / math.pi
    return origin
