"""Tests for the exception taxonomy.

Validates:
- GeoAccessError hierarchy and structured attributes
- Category classification (validation, permanent)
- ``to_error_dict()`` produces stable payload keys
- All package exceptions are GeoAccessError subclasses
"""

from __future__ import annotations

from geoaccess.core.config import ConfigValidationError
from geoaccess.core.exceptions import (
    DatasetOpenError,
    GeoAccessError,
    InvalidArgumentError,
    PermanentError,
    ValidationError,
)
from geoaccess.drivers.base import DriverRegistryError


class TestGeoAccessErrorBase:
    """GeoAccessError base class behavior."""

    def test_default_attributes(self) -> None:
        err = GeoAccessError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False

    def test_str_is_message(self) -> None:
        assert str(GeoAccessError("human-readable error")) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        d = GeoAccessError("x", stage="s", code="C", retryable=True).to_error_dict()
        assert set(d.keys()) == {"category", "code", "stage", "message", "retryable"}
        assert d["category"] == "transient"


class TestCategories:
    def test_validation_never_retryable(self) -> None:
        err = ValidationError("bad", retryable=True)
        assert err.retryable is False
        assert err.category == "validation"

    def test_permanent(self) -> None:
        assert PermanentError("gone").category == "permanent"


class TestInvalidArgumentError:
    def test_is_value_error_and_validation(self) -> None:
        err = InvalidArgumentError("name must be a non-empty string", argument="name")
        assert isinstance(err, ValueError)
        assert isinstance(err, ValidationError)
        assert err.argument == "name"
        assert err.code == "INVALID_ARGUMENT"
        assert str(err) == "name must be a non-empty string"

    def test_stage_override(self) -> None:
        assert InvalidArgumentError("x", stage="dms").stage == "dms"
        assert InvalidArgumentError("x").stage == "arguments"


class TestDatasetOpenError:
    def test_attributes(self) -> None:
        err = DatasetOpenError("a.tif", "r", ["vector", "raster"])
        assert str(err) == "Error opening dataset"
        assert err.category == "permanent"
        assert err.stage == "open"
        assert err.code == "DATASET_OPEN_FAILED"

    def test_error_dict_includes_context(self) -> None:
        d = DatasetOpenError("a.tif", "r+", ["raster"]).to_error_dict()
        assert d["path"] == "a.tif"
        assert d["mode"] == "r+"
        assert d["attempted"] == ["raster"]
        assert d["retryable"] is False


class TestHierarchy:
    def test_all_errors_are_geoaccess_errors(self) -> None:
        for cls in (
            InvalidArgumentError,
            DatasetOpenError,
            ConfigValidationError,
            DriverRegistryError,
        ):
            assert issubclass(cls, GeoAccessError)

    def test_driver_registry_error_str(self) -> None:
        err = DriverRegistryError("netcdf", "Unknown driver family")
        assert str(err) == "[netcdf] Unknown driver family"
