"""
Input models and enumerations for WMS-C capabilities documents.
"""

from typing import Any, List, Mapping, Optional, Tuple, Union
from enum import Enum

from pyproj import Transformer
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError


class CRS(str, Enum):
    """Spatial reference systems advertised by the tile layer."""
    EPSG_900913 = "EPSG:900913"
    EPSG_4326 = "EPSG:4326"
    CRS_84 = "CRS:84"
    EPSG_3857 = "EPSG:3857"


class TileFormat(str, Enum):
    """Tile image formats a WMS-C service can declare."""
    PNG = "png"
    JPEG = "jpeg"
    JPG = "jpg"

    @property
    def subtype(self) -> str:
        """MIME subtype, with ``jpg`` aliased to ``jpeg``."""
        return "jpeg" if self is TileFormat.JPG else self.value


DEFAULT_SPACES = 2

BBoxTuple = Tuple[float, float, float, float]

class BoundingBox(BaseModel):
    """
    Caller extent in a given CRS, projected to Web Mercator meters when the
    builders run with an input bbox.
    """
    min_x: float = Field(..., description="Minimum X coordinate")
    min_y: float = Field(..., description="Minimum Y coordinate")
    max_x: float = Field(..., description="Maximum X coordinate")
    max_y: float = Field(..., description="Maximum Y coordinate")
    crs: CRS = Field(default=CRS.EPSG_4326, description="Coordinate Reference System")

    @model_validator(mode='after')
    def validate_coordinates(self):
        """Validate that min coordinates are less than max coordinates."""
        if self.min_x >= self.max_x:
            raise ValueError('min_x must be less than max_x')
        if self.min_y >= self.max_y:
            raise ValueError('min_y must be less than max_y')
        return self

    @classmethod
    def from_tuple(cls, bbox: BBoxTuple, crs: CRS = CRS.EPSG_4326) -> "BoundingBox":
        """Create BoundingBox from a (west, south, east, north) tuple."""
        return cls(min_x=bbox[0], min_y=bbox[1], max_x=bbox[2], max_y=bbox[3], crs=crs)

    def to_tuple(self) -> BBoxTuple:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_crs(self, crs: CRS) -> "BoundingBox":
        """Transform the bounding box to a new CRS."""
        transformer = Transformer.from_crs(self.crs.value, crs.value, always_xy=True)
        xmin, ymin = transformer.transform(self.min_x, self.min_y)
        xmax, ymax = transformer.transform(self.max_x, self.max_y)
        return BoundingBox(min_x=xmin, min_y=ymin, max_x=xmax, max_y=ymax, crs=crs)


class ServiceOptions(BaseModel):
    """
    Service metadata consumed by the capabilities builders.

    Every field is optional at the model level. Each builder checks the
    fields it needs and reports the first missing one, so a partially
    filled instance is still a valid input for the builders that do not
    need the missing data.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: Optional[str] = Field(None, description="Service and layer title")
    url: Optional[str] = Field(None, description="Service endpoint, also the HTTP GET target")
    format: Optional[TileFormat] = Field(None, description="Tile image format")
    identifier: Optional[str] = Field(None, description="Layer name")
    minzoom: Optional[int] = Field(None, description="Minimum zoom level")
    maxzoom: Optional[int] = Field(None, description="Maximum zoom level")
    spaces: int = Field(default=DEFAULT_SPACES, ge=0, description="Indentation width of the XML output")
    abstract: Optional[str] = None
    keywords: Optional[List[Any]] = None
    bbox: Optional[BBoxTuple] = Field(None, description="(west, south, east, north) in degrees")
    access_constraints: Optional[str] = Field(default="none", alias="accessConstraints")
    fees: Optional[str] = Field(default="none")

    @field_validator("format", mode="before")
    @classmethod
    def blank_format_is_absent(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_validator("spaces", mode="before")
    @classmethod
    def default_spaces(cls, value: Any) -> Any:
        return DEFAULT_SPACES if value is None else value

    @classmethod
    def coerce(cls, options: Union["ServiceOptions", Mapping[str, Any], None]) -> "ServiceOptions":
        """
        Build options from a mapping, an existing instance or ``None``.

        Raises:
            ValidationError: If the input is not a mapping or fails model validation
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ValidationError(f"options must be a mapping or ServiceOptions, got {type(options).__name__}")
        try:
            return cls.model_validate(dict(options))
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid service options: {exc}", cause=exc) from exc


class ExceptionOptions(BaseModel):
    """Options for the service exception report."""

    model_config = ConfigDict(frozen=True)

    spaces: int = Field(default=DEFAULT_SPACES, ge=0, description="Indentation width of the XML output")

    @field_validator("spaces", mode="before")
    @classmethod
    def default_spaces(cls, value: Any) -> Any:
        return DEFAULT_SPACES if value is None else value

    @classmethod
    def coerce(cls, options: Union["ExceptionOptions", Mapping[str, Any], None]) -> "ExceptionOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ValidationError(f"options must be a mapping or ExceptionOptions, got {type(options).__name__}")
        try:
            return cls.model_validate(dict(options))
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid exception options: {exc}", cause=exc) from exc
