"""
Tests for wmsc.types module.

Tests Pydantic models, enums, and option coercion.
"""

import pytest

from wmsc.errors import ValidationError
from wmsc.types import BoundingBox, CRS, ExceptionOptions, ServiceOptions, TileFormat


class TestTypes:
    """Test type definitions and models."""

    def test_crs_enum(self):
        """Test CRS enum values."""
        assert CRS.EPSG_900913 == "EPSG:900913"
        assert CRS.EPSG_4326 == "EPSG:4326"
        assert CRS.CRS_84 == "CRS:84"
        assert CRS.EPSG_3857 == "EPSG:3857"

    def test_tile_format_subtype(self):
        """Only jpg is aliased."""
        assert TileFormat.PNG.subtype == "png"
        assert TileFormat.JPEG.subtype == "jpeg"
        assert TileFormat.JPG.subtype == "jpeg"

    def test_bounding_box_validation(self):
        """Test BoundingBox validation."""
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError, match="min_x must be less than max_x"):
            BoundingBox(min_x=10, min_y=0, max_x=0, max_y=10)

    def test_bounding_box_round_trip_tuple(self):
        bbox = BoundingBox.from_tuple((-10, -5, 10, 5))
        assert bbox.crs == CRS.EPSG_4326
        assert bbox.to_tuple() == (-10, -5, 10, 5)


class TestServiceOptions:
    """Test ServiceOptions coercion and defaults."""

    def test_defaults(self):
        options = ServiceOptions()
        assert options.title is None
        assert options.spaces == 2
        assert options.fees == "none"
        assert options.access_constraints == "none"

    def test_coerce_mapping_with_camel_case_alias(self):
        options = ServiceOptions.coerce({"accessConstraints": "restricted", "fees": "10 EUR"})
        assert options.access_constraints == "restricted"
        assert options.fees == "10 EUR"

    def test_coerce_mapping_with_field_name(self):
        options = ServiceOptions.coerce({"access_constraints": "restricted"})
        assert options.access_constraints == "restricted"

    def test_coerce_passes_instances_through(self):
        options = ServiceOptions(title="x")
        assert ServiceOptions.coerce(options) is options

    def test_coerce_none(self):
        assert ServiceOptions.coerce(None) == ServiceOptions()

    def test_format_is_parsed_but_not_normalized(self):
        options = ServiceOptions.coerce({"format": "jpg"})
        assert options.format is TileFormat.JPG

    def test_blank_format_is_absent(self):
        assert ServiceOptions.coerce({"format": ""}).format is None

    def test_unknown_format_fails(self):
        with pytest.raises(ValidationError, match="Invalid service options") as excinfo:
            ServiceOptions.coerce({"format": "gif"})
        assert excinfo.value.cause is not None

    def test_negative_spaces_fails(self):
        with pytest.raises(ValidationError):
            ServiceOptions.coerce({"spaces": -1})

    def test_none_spaces_uses_default(self):
        assert ServiceOptions.coerce({"spaces": None}).spaces == 2

    def test_bbox_accepts_list(self):
        options = ServiceOptions.coerce({"bbox": [-180, -85, 180, 85]})
        assert options.bbox == (-180.0, -85.0, 180.0, 85.0)

    def test_non_mapping_fails(self):
        with pytest.raises(ValidationError, match="options must be a mapping"):
            ServiceOptions.coerce("invalid")

    def test_options_are_frozen(self):
        from pydantic import ValidationError as PydanticValidationError

        options = ServiceOptions(title="x")
        with pytest.raises(PydanticValidationError):
            options.title = "y"


class TestExceptionOptions:
    """Test ExceptionOptions coercion."""

    def test_defaults(self):
        assert ExceptionOptions.coerce(None).spaces == 2

    def test_spaces(self):
        assert ExceptionOptions.coerce({"spaces": 4}).spaces == 4

    def test_negative_spaces_fails(self):
        with pytest.raises(ValidationError, match="Invalid exception options"):
            ExceptionOptions.coerce({"spaces": -2})

    def test_non_mapping_fails(self):
        with pytest.raises(ValidationError):
            ExceptionOptions.coerce(4)
