"""
Constants declarations for geomeasure
"""

# Sphere radii (meters)
WGS84_RADIUS = 6378137.0  # WGS84 major axis, used as the sphere radius
BAIDU_RADIUS = 6370996.81  # Baidu reference sphere

# Measurer identifiers
WGS84_ID = 'EPSG:4326'
BAIDU_ID = 'BAIDU'

# Below this |delta psi| an east-west rhumb course is treated as ill-conditioned (0/0)
RHUMB_EPSILON = 10e-12
