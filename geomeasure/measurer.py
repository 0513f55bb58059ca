"""
Named measurers, pairing an identifier with a measurement model, and a registry to look
them up by name.
"""

__all__ = [
    'BAIDU_SPHERE', 'DEFAULT_MEASURER', 'WGS84_SPHERE',
    'Measurer', 'SphereMeasurer', 'get_measurer',
]

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence, overload

import numpy as np
from pydantic import validate_call

from geomeasure._const import BAIDU_ID, BAIDU_RADIUS, WGS84_ID, WGS84_RADIUS
from geomeasure.coordinates import Coordinate
from geomeasure.sphere import Sphere


class Measurer(ABC):
    """
    Behavior shared by every measurer. Subclasses supply the four measurement operations
    and an identifier; path length and the segment breakdown are derived from them.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """The identifier callers use to select this measurer"""

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.id}>'

    @abstractmethod
    def measure_len_between(
        self, c1: Optional[Coordinate], c2: Optional[Coordinate]
    ) -> float:
        """Measure the length between two coordinates"""

    @abstractmethod
    def measure_area(self, coordinates: Sequence[Coordinate]) -> float:
        """Measure the area enclosed by a ring of coordinates"""

    @abstractmethod
    def locate(
        self, c: Coordinate, x_dist: Optional[float], y_dist: Optional[float]
    ) -> Coordinate:
        """Locate a new coordinate offset from c by x-axis and y-axis distances"""

    @abstractmethod
    def locate_into(
        self,
        c: Coordinate,
        x_dist: Optional[float],
        y_dist: Optional[float],
        out: Coordinate,
    ) -> Coordinate:
        """Same as locate(), writing the result into out"""

    @abstractmethod
    def _locate(
        self, c: Optional[Coordinate], x_dist: Optional[float], y_dist: Optional[float]
    ) -> Optional[Coordinate]:
        """Offsets c in place"""

    @abstractmethod
    def rotate(self, c: Coordinate, pivot: Coordinate, angle: float) -> Coordinate:
        """Rotate a new copy of c around pivot by angle degrees"""

    @abstractmethod
    def _rotate(self, c: Coordinate, pivot: Coordinate, angle: float) -> Coordinate:
        """Rotates c in place"""

    def measure_segment_lengths(self, coordinates: Sequence[Coordinate]) -> np.ndarray:
        """
        Measure the length of every consecutive pair of coordinates along a path.

        Args:
            coordinates:
                The path's coordinates, in order

        Returns:
            np.ndarray of length len(coordinates) - 1
        """
        return np.array(
            [
                self.measure_len_between(c1, c2)
                for c1, c2 in zip(coordinates[:-1], coordinates[1:])
            ],
            dtype=float
        )

    @overload
    def measure_length(self, coordinates: Sequence[Coordinate]) -> float:
        ...

    @overload
    def measure_length(self, coordinates: Coordinate, c2: Coordinate) -> float:
        ...

    def measure_length(self, coordinates, c2=None):
        """
        Measure the total length of a path.

        Either a sequence of coordinates (the sum of its segments) or two coordinates
        (equivalent to measure_len_between) may be supplied.

        Args:
            coordinates:
                The path's coordinates, in order, or a single start coordinate

            c2:
                (Optional) The end coordinate, when coordinates is a single coordinate

        Returns:
            (float) the path length; 0 for fewer than 2 coordinates or a missing path
        """
        if coordinates is None or isinstance(coordinates, Coordinate) or c2 is not None:
            return self.measure_len_between(coordinates, c2)

        # Accumulated in path order
        return float(sum(self.measure_segment_lengths(coordinates), 0.))


class SphereMeasurer(Measurer):
    """
    A measurer backed by a sphere of fixed radius. Every measurement is delegated to the
    sphere unchanged.

    Args:
        measurer_id:
            The identifier for this measurer, e.g. 'EPSG:4326'

        radius:
            The sphere's radius, in meters
    """

    def __init__(self, measurer_id: str, radius: float):
        self._id = measurer_id
        self._sphere = Sphere(radius)

    @property
    def id(self) -> str:
        return self._id

    @property
    def sphere(self) -> Sphere:
        return self._sphere

    @property
    def radius(self) -> float:
        return self._sphere.radius

    def measure_len_between(self, c1, c2):
        return self._sphere.measure_len_between(c1, c2)

    def measure_area(self, coordinates):
        return self._sphere.measure_area(coordinates)

    def locate(self, c, x_dist, y_dist):
        return self._sphere.locate(c, x_dist, y_dist)

    def locate_into(self, c, x_dist, y_dist, out):
        return self._sphere.locate_into(c, x_dist, y_dist, out)

    def _locate(self, c, x_dist, y_dist):
        return self._sphere._locate(c, x_dist, y_dist)  # pylint: disable=protected-access

    def rotate(self, c, pivot, angle):
        return self._sphere.rotate(c, pivot, angle)

    def _rotate(self, c, pivot, angle):
        return self._sphere._rotate(c, pivot, angle)  # pylint: disable=protected-access

    def measure_segment_lengths(self, coordinates):
        return self._sphere.measure_segment_lengths(coordinates)


WGS84_SPHERE = SphereMeasurer(WGS84_ID, WGS84_RADIUS)
BAIDU_SPHERE = SphereMeasurer(BAIDU_ID, BAIDU_RADIUS)
DEFAULT_MEASURER = WGS84_SPHERE

_MEASURERS: Dict[str, Measurer] = {
    WGS84_ID: WGS84_SPHERE,
    'WGS84': WGS84_SPHERE,
    'WGS84SPHERE': WGS84_SPHERE,
    BAIDU_ID: BAIDU_SPHERE,
    'BAIDUSPHERE': BAIDU_SPHERE,
}


@validate_call
def get_measurer(name: Optional[str] = None) -> Measurer:
    """
    Look up a measurer by its identifier (or an alias), case-insensitively.

    Args:
        name:
            (Optional) e.g. 'EPSG:4326' or 'BAIDU'. If omitted, returns the default
            measurer.

    Returns:
        Measurer
    """
    if name is None:
        return DEFAULT_MEASURER

    measurer = _MEASURERS.get(name.upper())
    if measurer is None:
        raise ValueError(f"Unknown measurer '{name}'. Options: {list(_MEASURERS.keys())}")

    return measurer
