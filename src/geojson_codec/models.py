from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from geojson_codec.types import (
    BBox,
    FeatureId,
    LineStringCoords,
    MultiLineStringCoords,
    MultiPointCoords,
    MultiPolygonCoords,
    PolygonCoords,
    Position,
)


def format_loc(loc: tuple[int | str, ...]) -> str:
    """format error location as a path, for example `features[0].geometry.coordinates[2]`"""
    path = ""
    for item in loc:
        if isinstance(item, int):
            path += f"[{item}]"
        else:
            path += f".{item}" if path else item
    return path


class GeoJsonError(Exception):
    type_str = "geojson-codec/error"
    title = "GeoJSON Error"

    def __init__(
        self: "GeoJsonError",
        message: str | None = None,
        loc: tuple[int | str, ...] = (),
    ) -> None:
        super().__init__(message if message is not None else self.title)
        # location of the offending node, extended while the error propagates
        self.loc = tuple(loc)

    def __str__(self: "GeoJsonError") -> str:
        message = super().__str__()
        if self.loc:
            return f"{message} (at {format_loc(self.loc)})"
        return message


class StructuralError(GeoJsonError):
    type_str = "geojson-codec/structural-error"
    title = "JSON Value Has Unexpected Shape"


class ExpectedObjectValueError(StructuralError):
    type_str = "geojson-codec/expected-object-value"
    title = "Expected JSON Object"


class ExpectedArrayValueError(StructuralError):
    type_str = "geojson-codec/expected-array-value"
    title = "Expected JSON Array"


class ExpectedStringValueError(StructuralError):
    type_str = "geojson-codec/expected-string-value"
    title = "Expected JSON String"


class ExpectedF64ValueError(StructuralError):
    type_str = "geojson-codec/expected-f64-value"
    title = "Expected Finite JSON Number"


class SchemaError(GeoJsonError):
    type_str = "geojson-codec/schema-error"
    title = "GeoJSON Schema Error"


class ExpectedPropertyError(SchemaError):
    type_str = "geojson-codec/expected-property"
    title = "Missing Property"

    def __init__(self: "ExpectedPropertyError", name: str) -> None:
        super().__init__(f"expected property `{name}`")
        self.name = name


class UnknownTypeError(SchemaError):
    type_str = "geojson-codec/unknown-type"
    title = "Unknown GeoJSON Type"

    def __init__(self: "UnknownTypeError", type_name: str) -> None:
        super().__init__(f"unknown GeoJSON type `{type_name}`")
        self.type_name = type_name


class UnexpectedTypeError(SchemaError):
    type_str = "geojson-codec/unexpected-type"
    title = "Unexpected GeoJSON Type"

    def __init__(self: "UnexpectedTypeError", expected: str, actual: str) -> None:
        super().__init__(f"expected {expected} object, got `{actual}`")
        self.expected = expected
        self.actual = actual


class InvalidIdentifierTypeError(SchemaError):
    type_str = "geojson-codec/invalid-identifier-type"
    title = "Feature Identifier Must Be A String Or Number"


class PropertiesExpectedObjectOrNullError(SchemaError):
    type_str = "geojson-codec/properties-expected-object-or-null"
    title = "Feature Properties Must Be An Object Or Null"


class InvalidGeometryValueError(SchemaError):
    type_str = "geojson-codec/invalid-geometry-value"
    title = "Feature Geometry Must Be An Object Or Null"


class BboxExpectedArrayError(SchemaError):
    type_str = "geojson-codec/bbox-expected-array"
    title = "Bounding Box Must Be An Array"


class BboxExpectedNumericValuesError(SchemaError):
    type_str = "geojson-codec/bbox-expected-numeric-values"
    title = "Bounding Box Must Contain Numeric Values"


class MalformedJsonError(GeoJsonError):
    type_str = "geojson-codec/malformed-json"
    title = "Malformed JSON"


class GeoJsonExpectedObjectError(GeoJsonError):
    type_str = "geojson-codec/geojson-expected-object"
    title = "GeoJSON Must Be A JSON Object"


class NestingDepthExceededError(GeoJsonError):
    type_str = "geojson-codec/nesting-depth-exceeded"
    title = "GeometryCollection Nesting Too Deep"

    def __init__(self: "NestingDepthExceededError", max_depth: int) -> None:
        super().__init__(f"GeometryCollection nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth


class EncodeError(GeoJsonError):
    type_str = "geojson-codec/encode-error"
    title = "Encode Error"


class ForeignMemberCollisionError(EncodeError):
    type_str = "geojson-codec/foreign-member-collision"
    title = "Foreign Member Uses Reserved Key"

    def __init__(self: "ForeignMemberCollisionError", key: str) -> None:
        super().__init__(f"foreign member `{key}` collides with a reserved GeoJSON member")
        self.key = key


class _GeoJsonBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    bbox: BBox | None = None
    foreign_members: dict[str, Any] | None = None

    @field_validator("foreign_members")
    @classmethod
    def empty_foreign_members_to_none(cls, v: dict[str, Any] | None) -> dict[str, Any] | None:
        return v or None


class Point(_GeoJsonBase):
    type: Literal["Point"] = "Point"
    coordinates: Position


class MultiPoint(_GeoJsonBase):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: MultiPointCoords


class LineString(_GeoJsonBase):
    type: Literal["LineString"] = "LineString"
    coordinates: LineStringCoords


class MultiLineString(_GeoJsonBase):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: MultiLineStringCoords


class Polygon(_GeoJsonBase):
    type: Literal["Polygon"] = "Polygon"
    coordinates: PolygonCoords


class MultiPolygon(_GeoJsonBase):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: MultiPolygonCoords


class GeometryCollection(_GeoJsonBase):
    type: Literal["GeometryCollection"] = "GeometryCollection"
    geometries: list["Geometry"] = Field(default_factory=list)


Geometry = Union[  # noqa: UP007
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]

GeometryCollection.model_rebuild()


class Feature(_GeoJsonBase):
    type: Literal["Feature"] = "Feature"
    geometry: Geometry | None = None
    id: FeatureId | None = None
    properties: dict[str, Any] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def reject_bool_id(cls, v: Any) -> Any:  # noqa: ANN401
        if isinstance(v, bool):
            raise ValueError("feature id must be a string or a number, got a boolean")
        return v

    @classmethod
    def from_geometry(cls, geometry: Geometry) -> "Feature":  # noqa: ANN102
        return cls(geometry=geometry)

    def property(self: "Feature", key: str) -> Any:  # noqa: ANN401
        if self.properties is None:
            return None
        return self.properties.get(key)

    def contains_property(self: "Feature", key: str) -> bool:
        return self.properties is not None and key in self.properties


class FeatureCollection(_GeoJsonBase):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)


GeojsonObject = Geometry | Feature | FeatureCollection
