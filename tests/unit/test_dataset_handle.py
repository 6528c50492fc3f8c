"""Tests for DatasetHandle and the DatasetInfo summary."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest.mock import MagicMock

from affine import Affine

from geoaccess.drivers.registry import DriverRegistry
from geoaccess.models.access import AccessMode
from geoaccess.models.dataset import DatasetHandle
from geoaccess.models.info import DatasetInfo
from geoaccess.operations.open_dataset import open_dataset


def _raster_raw() -> MagicMock:
    raw = MagicMock()
    raw.driver = "GTiff"
    raw.count = 3
    raw.closed = False
    raw.transform = Affine(10.0, 0.0, 500000.0, 0.0, -10.0, 4600000.0)
    raw.crs.to_string.return_value = "EPSG:32633"
    return raw


class TestDatasetHandle(unittest.TestCase):
    """Handle properties are derived from the wrapped library object."""

    def test_raster_geotransform(self) -> None:
        handle = DatasetHandle("dem.tif", AccessMode.READ_ONLY, "raster", _raster_raw())
        gt = handle.geotransform
        assert gt is not None
        assert gt.to_tuple() == (500000.0, 10.0, 0.0, 4600000.0, 0.0, -10.0)

    def test_vector_has_no_geotransform(self) -> None:
        handle = DatasetHandle("roads.shp", AccessMode.READ_ONLY, "vector", MagicMock())
        assert handle.geotransform is None

    def test_context_manager_closes(self) -> None:
        raw = _raster_raw()
        with DatasetHandle("dem.tif", AccessMode.READ_ONLY, "raster", raw) as handle:
            assert handle.driver == "GTiff"
        raw.close.assert_called_once()

    def test_describe_raster(self) -> None:
        handle = DatasetHandle("dem.tif", AccessMode.READ_UPDATE, "raster", _raster_raw())
        info = handle.describe()
        assert isinstance(info, DatasetInfo)
        assert info.family == "raster"
        assert info.driver == "GTiff"
        assert info.access == "r+"
        assert info.crs == "EPSG:32633"
        assert info.band_count == 3
        assert info.feature_count is None
        assert info.geotransform == [500000.0, 10.0, 0.0, 4600000.0, 0.0, -10.0]

    def test_describe_vector_legacy_crs_dict(self) -> None:
        raw = MagicMock()
        raw.driver = "ESRI Shapefile"
        raw.crs = {"init": "epsg:4326"}
        raw.__len__.return_value = 7
        info = DatasetHandle("roads.shp", AccessMode.READ_ONLY, "vector", raw).describe()
        assert info.crs == "EPSG:4326"
        assert info.feature_count == 7
        assert info.band_count is None
        assert info.geotransform is None

    def test_describe_without_crs(self) -> None:
        raw = _raster_raw()
        raw.crs = None
        info = DatasetHandle("dem.tif", AccessMode.READ_ONLY, "raster", raw).describe()
        assert info.crs is None

    def test_info_serialises(self) -> None:
        info = DatasetHandle("dem.tif", AccessMode.READ_ONLY, "raster", _raster_raw()).describe()
        payload = info.model_dump()
        assert payload["path"] == "dem.tif"
        assert DatasetInfo.model_validate_json(info.model_dump_json()) == info


class TestDescribeRealFiles:
    """describe() against datasets opened through the libraries."""

    def test_geotiff(self, geotiff_path: Path, store) -> None:
        with open_dataset(geotiff_path, registry=DriverRegistry(("raster",)), store=store) as handle:
            info = handle.describe()
        assert info.driver == "GTiff"
        assert info.band_count == 1
        assert info.crs == "EPSG:32633"

    def test_geojson(self, geojson_path: Path, store) -> None:
        with open_dataset(geojson_path, registry=DriverRegistry(("vector",)), store=store) as handle:
            info = handle.describe()
        assert info.driver == "GeoJSON"
        assert info.feature_count == 2
        assert info.crs is not None
