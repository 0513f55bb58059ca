"""
Representation of a specific point on a sphere
"""

__all__ = ['Coordinate']

from typing import Tuple, Union

from typing_extensions import Self


class Coordinate:
    """
    Representation of a mutable coordinate on the globe (i.e., a lon/lat pair, stored as x/y).

    Unlike a value object, a Coordinate can be written into by measurement routines that
    take an output coordinate. Ranges are not enforced; callers own validation.

    Can be constructed from:
        Coordinate(x, y)
        Coordinate(other_coordinate)
        Coordinate((x, y))
    """

    __hash__ = None  # type: ignore

    def __init__(
        self,
        x: Union[float, int, str, 'Coordinate', Tuple[float, float]],
        y: Union[float, int, str, None] = None,
    ):
        if y is None:
            if isinstance(x, Coordinate):
                x, y = x.x, x.y
            elif isinstance(x, (tuple, list)) and len(x) == 2:
                x, y = x
            else:
                raise TypeError(
                    f'Coordinate requires an x/y pair or another Coordinate, received {x!r}'
                )

        self.x = float(x)  # type: ignore
        self.y = float(y)  # type: ignore

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f'<Coordinate({self.x}, {self.y})>'

    @property
    def longitude(self) -> float:
        return self.x

    @longitude.setter
    def longitude(self, value: float):
        self.x = value

    @property
    def latitude(self) -> float:
        return self.y

    @latitude.setter
    def latitude(self, value: float):
        self.y = value

    def set(self, x: float, y: float) -> Self:
        """Overwrite this coordinate's x/y in place and return it"""
        self.x = float(x)
        self.y = float(y)
        return self

    def copy(self) -> 'Coordinate':
        """Returns an independent copy of this coordinate"""
        return Coordinate(self)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (x, y).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (y, x)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.y, self.x

        return self.x, self.y
