from geomeasure._version import __version__  # noqa: F401
from geomeasure.utils.logging import LOGGER
from geomeasure.coordinates import Coordinate
from geomeasure.rhumb import rhumb_bearing, rhumb_destination
from geomeasure.sphere import Sphere
from geomeasure.measurer import (
    BAIDU_SPHERE, DEFAULT_MEASURER, WGS84_SPHERE, Measurer, SphereMeasurer, get_measurer
)

__all__ = [
    'BAIDU_SPHERE',
    'Coordinate',
    'DEFAULT_MEASURER',
    'Measurer',
    'Sphere',
    'SphereMeasurer',
    'WGS84_SPHERE',
    'get_measurer',
    'rhumb_bearing',
    'rhumb_destination',
    'LOGGER',
]
