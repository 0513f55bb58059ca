"""
Measurement calculations on a sphere of a given radius
"""

__all__ = ['Sphere']

import math
from typing import Optional, Sequence

import numpy as np
from pydantic import Field, validate_call
from typing_extensions import Annotated

from geomeasure.coordinates import Coordinate
from geomeasure.rhumb import rhumb_bearing, rhumb_destination
from geomeasure.utils.functions import divide, to_radian, wrap
from geomeasure.utils.mixins import LoggingMixin

# Rings spanning more latitude than this are poorly served by the area approximation
_AREA_LATITUDE_SPAN_WARNING = 10.


def _clamp_unit(value: float) -> float:
    """Clamp a value into [0, 1] so that sqrt/asin stay in their domains"""
    return min(max(value, 0.), 1.)


class Sphere(LoggingMixin):
    """
    Measures lengths, areas and offsets on a sphere. Lengths are returned in the units of
    the radius (meters for the standard measurers) and areas in those units squared.
    """

    @validate_call
    def __init__(self, radius: Annotated[float, Field(gt=0, allow_inf_nan=False)]):
        super().__init__()
        self._radius = radius

    def __repr__(self):
        return f'<Sphere of radius {self._radius}>'

    @property
    def radius(self) -> float:
        return self._radius

    def measure_len_between(
        self,
        c1: Optional[Coordinate],
        c2: Optional[Coordinate]
    ) -> float:
        """
        Calculate the great circle (haversine) distance between two coordinates.

        Args:
            c1:
                A coordinate

            c2:
                A second coordinate

        Returns:
            (float) the distance, or 0 if either coordinate is missing
        """
        if c1 is None or c2 is None:
            return 0

        lat1, lat2 = to_radian(c1.y), to_radian(c2.y)
        d_lat = lat1 - lat2
        d_lon = to_radian(c1.x) - to_radian(c2.x)
        var1 = (math.sin(d_lat / 2) ** 2) + math.cos(lat1) * math.cos(lat2) * (
            math.sin(d_lon / 2) ** 2
        )
        return 2 * math.asin(math.sqrt(_clamp_unit(var1))) * self._radius

    def measure_segment_lengths(self, coordinates: Sequence[Coordinate]) -> np.ndarray:
        """
        Calculate the haversine distance of every consecutive pair of coordinates along
        a path, vectorised.

        Args:
            coordinates:
                The path's coordinates, in order. Missing (None) coordinates contribute
                0 to both of their segments.

        Returns:
            np.ndarray of length len(coordinates) - 1 (empty for fewer than 2 coordinates)
        """
        if len(coordinates) < 2:
            return np.zeros(0)

        missing = np.array([c is None for c in coordinates])
        p = np.radians(np.array(
            [(math.nan, math.nan) if c is None else c.to_float() for c in coordinates],
            dtype=float
        ))
        lon, lat = p[:, 0], p[:, 1]
        d_lat = lat[:-1] - lat[1:]
        d_lon = lon[:-1] - lon[1:]
        var1 = np.sin(d_lat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * (
            np.sin(d_lon / 2) ** 2
        )
        lengths = 2 * np.arcsin(np.sqrt(np.clip(var1, 0., 1.))) * self._radius
        return np.where(missing[:-1] | missing[1:], 0., lengths)

    def measure_area(self, coordinates: Sequence[Coordinate]) -> float:
        """
        Approximate the area enclosed by a ring of coordinates.

        The ring is closed implicitly (the last coordinate connects back to the first).
        Longitudes are scaled by the cosine of their latitude and the ring is then summed
        as a planar polygon, so accuracy degrades for rings covering large extents.

        Args:
            coordinates:
                The ring's coordinates, without a repeated closing coordinate

        Returns:
            (float) the area, or 0 for fewer than 3 coordinates
        """
        if len(coordinates) < 3:
            self.logger.debug(
                'Cannot measure area of %s coordinates; returning 0', len(coordinates)
            )
            return 0

        lats = [c.y for c in coordinates]
        if max(lats) - min(lats) > _AREA_LATITUDE_SPAN_WARNING:
            self.warn_once(
                'Area of rings spanning more than %s degrees of latitude is approximate '
                'and may be inaccurate. (this warning will not repeat)',
                _AREA_LATITUDE_SPAN_WARNING
            )

        a = to_radian(self._radius)
        total = 0.
        for e, f in zip(coordinates[:-1], coordinates[1:]):
            total += (
                e.x * a * math.cos(to_radian(e.y)) * f.y * a
                - f.x * a * math.cos(to_radian(f.y)) * e.y * a
            )

        e, f = coordinates[-1], coordinates[0]
        total += (
            e.x * a * math.cos(to_radian(e.y)) * f.y * a
            - f.x * a * math.cos(to_radian(f.y)) * e.y * a
        )
        return 0.5 * abs(total)

    def locate(
        self,
        c: Coordinate,
        x_dist: Optional[float],
        y_dist: Optional[float]
    ) -> Coordinate:
        """
        Locate the coordinate reached by moving x_dist east and y_dist north of c.
        Negative distances move west/south. c is not modified.

        Args:
            c:
                The source coordinate

            x_dist:
                The east-west distance

            y_dist:
                The north-south distance

        Returns:
            (Coordinate) a new coordinate
        """
        return self.locate_into(c, x_dist, y_dist, Coordinate(0, 0))

    def locate_into(
        self,
        c: Coordinate,
        x_dist: Optional[float],
        y_dist: Optional[float],
        out: Coordinate,
    ) -> Coordinate:
        """
        Same as locate(), but writes the result into the caller-supplied out coordinate
        and returns it. c is not modified (unless it is out).
        """
        out.set(c.x, c.y)
        return self._locate(out, x_dist, y_dist)  # type: ignore

    def _locate(
        self,
        c: Optional[Coordinate],
        x_dist: Optional[float],
        y_dist: Optional[float]
    ) -> Optional[Coordinate]:
        """
        Offsets c in place by x_dist/y_dist. Writes into and returns c.

        Latitude is offset first; the longitude offset is scaled by the new latitude.
        """
        if c is None:
            self.logger.debug('No coordinate to locate from; returning None')
            return None

        # Missing or nan distances count as no offset
        if x_dist is None or math.isnan(x_dist):
            x_dist = 0
        if y_dist is None or math.isnan(y_dist):
            y_dist = 0
        if not x_dist and not y_dist:
            return c

        ry = to_radian(c.y)
        if y_dist != 0:
            dy = abs(y_dist)
            sy = 2 * math.asin(_clamp_unit(dy / (2 * self._radius)))
            ry = ry + sy * (1 if y_dist > 0 else -1)
            y = wrap(ry * 180 / math.pi, -90, 90)
        else:
            y = c.y

        if x_dist != 0:
            dx = abs(x_dist)
            rx = to_radian(c.x)
            sx = 2 * math.asin(math.sqrt(_clamp_unit(divide(
                math.sin(dx / (2 * self._radius)) ** 2,
                math.cos(ry) ** 2
            ))))
            rx = rx + sx * (1 if x_dist > 0 else -1)
            x = wrap(rx * 180 / math.pi, -180, 180)
        else:
            x = c.x

        c.x = x
        c.y = y
        return c

    def rotate(self, c: Coordinate, pivot: Coordinate, angle: float) -> Coordinate:
        """
        Rotate a coordinate around a pivot, following a rhumb line. c is not modified.

        Args:
            c:
                The source coordinate

            pivot:
                The coordinate to rotate around

            angle:
                The angle of rotation, in degrees. Positive angles rotate counter-clockwise.

        Returns:
            (Coordinate) a new, rotated coordinate
        """
        return self._rotate(Coordinate(c), pivot, angle)

    def _rotate(self, c: Coordinate, pivot: Coordinate, angle: float) -> Coordinate:
        """Rotates c around pivot in place. Writes into and returns c."""
        initial_angle = rhumb_bearing(pivot, c)
        final_angle = initial_angle - angle
        distance = self.measure_len_between(pivot, c)
        c.x = pivot.x
        c.y = pivot.y
        return rhumb_destination(c, distance, final_angle, self._radius)
