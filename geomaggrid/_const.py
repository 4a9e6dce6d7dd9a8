"""
Constants declarations for geomaggrid
"""

# Geometry of the reference magnetic grids (degrees)
SAMPLING_RES = 10.0
SAMPLING_MIN_LAT = -60.0
SAMPLING_MAX_LAT = 60.0
SAMPLING_MIN_LON = -180.0
SAMPLING_MAX_LON = 180.0

# Absolute bounds of a geographic coordinate
LATITUDE_LIMIT = 90.0
LONGITUDE_LIMIT = 180.0

# Unit factors
KMH_TO_MPS = 1 / 3.6
INCH_TO_METERS = 0.0254
