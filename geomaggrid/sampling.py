"""
Bilinear sampling of values stored on a regular latitude/longitude mesh
"""

__all__ = [
    'DEFAULT_CONFIG', 'GeoGridSampler', 'SamplingConfig', 'index_for', 'sample',
    'sample_array'
]

import math
from typing import Dict, Literal, Optional, Tuple, get_args

import numpy as np
from pydantic import validate_call

from geomaggrid._const import (
    LATITUDE_LIMIT, LONGITUDE_LIMIT, SAMPLING_MAX_LAT, SAMPLING_MAX_LON,
    SAMPLING_MIN_LAT, SAMPLING_MIN_LON, SAMPLING_RES
)
from geomaggrid.utils.logging import LOGGER, warn_once


FieldName = Literal['declination', 'inclination', 'strength']
_FIELDS: Tuple[str, ...] = get_args(FieldName)

_OUT_OF_DOMAIN_WARNING = (
    'Coordinates outside of [-90, 90] latitude or [-180, 180] longitude sample as 0.0 '
    '(this warning will not repeat)'
)


class SamplingConfig:
    """
    The geometry of a sampling mesh: the inclusive latitude/longitude bounds of the grid
    vertices and the angular spacing between them.
    """

    @validate_call
    def __init__(
        self,
        min_lat: float = SAMPLING_MIN_LAT,
        max_lat: float = SAMPLING_MAX_LAT,
        min_lon: float = SAMPLING_MIN_LON,
        max_lon: float = SAMPLING_MAX_LON,
        resolution: float = SAMPLING_RES,
    ):
        if resolution <= 0:
            raise ValueError(f'resolution must be positive, not {resolution}')

        for axis, low, high in (('latitude', min_lat, max_lat), ('longitude', min_lon, max_lon)):
            if low >= high:
                raise ValueError(f'{axis} minimum {low} must be less than maximum {high}')

            steps = (high - low) / resolution
            if not math.isclose(steps, round(steps)):
                raise ValueError(
                    f'{axis} span [{low}, {high}] is not a whole number of {resolution} '
                    'degree steps'
                )

        self._min_lat = min_lat
        self._max_lat = max_lat
        self._min_lon = min_lon
        self._max_lon = max_lon
        self._resolution = resolution

    def __eq__(self, other) -> bool:
        if not isinstance(other, SamplingConfig):
            return False

        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self):
        return (
            f'<SamplingConfig lat=[{self.min_lat}, {self.max_lat}] '
            f'lon=[{self.min_lon}, {self.max_lon}] res={self.resolution}>'
        )

    def _key(self) -> Tuple[float, float, float, float, float]:
        return self._min_lat, self._max_lat, self._min_lon, self._max_lon, self._resolution

    @property
    def min_lat(self) -> float:
        return self._min_lat

    @property
    def max_lat(self) -> float:
        return self._max_lat

    @property
    def min_lon(self) -> float:
        return self._min_lon

    @property
    def max_lon(self) -> float:
        return self._max_lon

    @property
    def resolution(self) -> float:
        return self._resolution

    @property
    def lat_bands(self) -> int:
        """The number of grid rows (latitude vertices)"""
        return round((self._max_lat - self._min_lat) / self._resolution) + 1

    @property
    def lon_bands(self) -> int:
        """The number of grid columns (longitude vertices)"""
        return round((self._max_lon - self._min_lon) / self._resolution) + 1

    @property
    def shape(self) -> Tuple[int, int]:
        """The (rows, columns) shape a grid must have to be sampled with this config"""
        return self.lat_bands, self.lon_bands


DEFAULT_CONFIG = SamplingConfig()


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _in_domain(lat: float, lon: float) -> bool:
    # NaN fails both comparisons
    return -LATITUDE_LIMIT <= lat <= LATITUDE_LIMIT and -LONGITUDE_LIMIT <= lon <= LONGITUDE_LIMIT


def index_for(value: float, minimum: float, maximum: float, resolution: float) -> int:
    """
    Finds the index of the grid line at or below a value along one axis.

    The value is first clamped to [minimum, maximum - resolution] so that the following
    grid line (index + 1), needed for interpolation, always exists. A value at the
    maximum therefore resolves to the penultimate grid line.

    Args:
        value:
            The coordinate value along the axis

        minimum:
            The coordinate of the first grid line

        maximum:
            The coordinate of the last grid line

        resolution:
            The spacing between grid lines

    Returns:
        int
    """
    value = _clamp(value, minimum, maximum - resolution)
    return math.floor((value - minimum) / resolution)


def _index_array(values: np.ndarray, minimum: float, maximum: float, resolution: float):
    values = np.clip(values, minimum, maximum - resolution)
    return np.floor((values - minimum) / resolution).astype(np.intp)


def sample(
    grid: np.ndarray,
    lat: float,
    lon: float,
    config: SamplingConfig = DEFAULT_CONFIG,
    strict: bool = False,
) -> float:
    """
    Bilinearly interpolates a grid at a latitude/longitude.

    Latitudes and longitudes beyond the grid's own coverage are clamped onto its edge cells.
    Coordinates outside of the absolute [-90, 90] / [-180, 180] range cannot be placed at
    all and return 0.0, which is indistinguishable from a genuine zero sample; pass
    strict=True to raise instead.

    Args:
        grid:
            A 2-D array of shape config.shape, rows ordered by ascending latitude and
            columns by ascending longitude

        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        config: (Default DEFAULT_CONFIG)
            The mesh geometry of the grid

        strict: (Default False)
            Raise a ValueError for out-of-range coordinates instead of returning 0.0

    Returns:
        float
    """
    if not _in_domain(lat, lon):
        if strict:
            raise ValueError(
                f'Coordinate (lat={lat}, lon={lon}) is outside of '
                f'[-{LATITUDE_LIMIT}, {LATITUDE_LIMIT}] / [-{LONGITUDE_LIMIT}, {LONGITUDE_LIMIT}]'
            )
        warn_once(_OUT_OF_DOMAIN_WARNING)
        LOGGER.debug('Sampled out-of-range coordinate lat=%s lon=%s as 0.0', lat, lon)
        return 0.0

    res = config.resolution

    # Lower-left vertex of the enclosing cell, held at the southern and western grid edges
    min_lat = max(math.floor(lat / res) * res, config.min_lat)
    min_lon = max(math.floor(lon / res) * res, config.min_lon)

    lat_idx = index_for(min_lat, config.min_lat, config.max_lat, res)
    lon_idx = index_for(min_lon, config.min_lon, config.max_lon, res)

    data_sw = float(grid[lat_idx, lon_idx])
    data_se = float(grid[lat_idx, lon_idx + 1])
    data_ne = float(grid[lat_idx + 1, lon_idx + 1])
    data_nw = float(grid[lat_idx + 1, lon_idx])

    lat_t = _clamp((lat - min_lat) / res, 0.0, 1.0)
    lon_t = _clamp((lon - min_lon) / res, 0.0, 1.0)

    # Longitude first along both edges, then latitude
    data_min = lon_t * (data_se - data_sw) + data_sw
    data_max = lon_t * (data_ne - data_nw) + data_nw

    return lat_t * (data_max - data_min) + data_min


def sample_array(
    grid: np.ndarray,
    lats,
    lons,
    config: SamplingConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """
    Vectorized form of sample(). Latitudes and longitudes are broadcast against each other
    and each element is interpolated exactly as sample() would, including the 0.0
    result for out-of-range coordinates.

    Args:
        grid:
            A 2-D array of shape config.shape

        lats:
            An array-like of latitudes, in degrees

        lons:
            An array-like of longitudes, in degrees

        config: (Default DEFAULT_CONFIG)
            The mesh geometry of the grid

    Returns:
        np.ndarray of floats, shaped like the broadcast inputs
    """
    lats, lons = np.broadcast_arrays(
        np.asarray(lats, dtype=np.float64),
        np.asarray(lons, dtype=np.float64),
    )
    valid = (
        (lats >= -LATITUDE_LIMIT) & (lats <= LATITUDE_LIMIT) &
        (lons >= -LONGITUDE_LIMIT) & (lons <= LONGITUDE_LIMIT)
    )
    if not valid.all():
        warn_once(_OUT_OF_DOMAIN_WARNING)

    # Placeholder coordinates keep invalid elements indexable; they are zeroed below
    lats = np.where(valid, lats, 0.0)
    lons = np.where(valid, lons, 0.0)

    res = config.resolution
    min_lat = np.maximum(np.floor(lats / res) * res, config.min_lat)
    min_lon = np.maximum(np.floor(lons / res) * res, config.min_lon)

    lat_idx = _index_array(min_lat, config.min_lat, config.max_lat, res)
    lon_idx = _index_array(min_lon, config.min_lon, config.max_lon, res)

    table = np.asarray(grid, dtype=np.float64)
    data_sw = table[lat_idx, lon_idx]
    data_se = table[lat_idx, lon_idx + 1]
    data_ne = table[lat_idx + 1, lon_idx + 1]
    data_nw = table[lat_idx + 1, lon_idx]

    lat_t = np.clip((lats - min_lat) / res, 0.0, 1.0)
    lon_t = np.clip((lons - min_lon) / res, 0.0, 1.0)

    data_min = lon_t * (data_se - data_sw) + data_sw
    data_max = lon_t * (data_ne - data_nw) + data_nw

    return np.where(valid, lat_t * (data_max - data_min) + data_min, 0.0)


class GeoGridSampler:
    """
    Holds one declination, inclination and strength grid sharing a mesh geometry, and
    interpolates them at arbitrary coordinates.

    Grids are copied and made read-only on construction.

    Args:
        declination:
            Declination values, in degrees

        inclination:
            Inclination values, in degrees

        strength:
            Field strength values, in centi-Tesla

        config: (Default DEFAULT_CONFIG)
            The mesh geometry shared by all three grids
    """

    def __init__(
        self,
        declination,
        inclination,
        strength,
        config: Optional[SamplingConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._grids: Dict[str, np.ndarray] = {
            name: self._prepare_grid(name, grid)
            for name, grid in zip(_FIELDS, (declination, inclination, strength))
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoGridSampler):
            return False

        return self.config == other.config and all(
            np.array_equal(self._grids[name], other._grids[name]) for name in _FIELDS
        )

    def __repr__(self):
        return f'<GeoGridSampler {self.config.lat_bands}x{self.config.lon_bands} {self.config}>'

    def _prepare_grid(self, name: str, grid) -> np.ndarray:
        table = np.array(grid, copy=True)
        if table.ndim != 2:
            raise ValueError(f'{name} grid must be 2-dimensional, not {table.ndim}-dimensional')

        if table.shape != self.config.shape:
            raise ValueError(
                f'{name} grid has shape {table.shape}; sampling config requires '
                f'{self.config.shape}'
            )

        table.setflags(write=False)
        return table

    def grid(self, field: FieldName) -> np.ndarray:
        """Returns the read-only grid for a field"""
        if field not in self._grids:
            raise ValueError(
                f"Unrecognized field '{field}'; expected one of {', '.join(_FIELDS)}"
            )

        return self._grids[field]

    def sample(self, field: FieldName, lat: float, lon: float, strict: bool = False) -> float:
        """
        Interpolates a field at a latitude/longitude. See sample() for the handling
        of out-of-range coordinates.

        Args:
            field:
                One of 'declination', 'inclination' or 'strength'

            lat:
                Latitude, in degrees

            lon:
                Longitude, in degrees

            strict: (Default False)
                Raise a ValueError for out-of-range coordinates instead of returning 0.0

        Returns:
            float
        """
        return sample(self.grid(field), lat, lon, self.config, strict=strict)

    def sample_array(self, field: FieldName, lats, lons) -> np.ndarray:
        """Vectorized form of .sample()"""
        return sample_array(self.grid(field), lats, lons, self.config)
