"""Field extraction from JSON objects.

All `optional_*` / `required_*` helpers remove the member they read from the
object, so whatever is left after the known members are extracted are the
foreign members of that object.
"""

from __future__ import annotations

import math
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Callable, TypeVar

from geojson_codec.models import (
    BboxExpectedArrayError,
    BboxExpectedNumericValuesError,
    ExpectedArrayValueError,
    ExpectedObjectValueError,
    ExpectedPropertyError,
    Feature,
    GeoJsonError,
    Geometry,
    InvalidGeometryValueError,
    InvalidIdentifierTypeError,
    PropertiesExpectedObjectOrNullError,
)
from geojson_codec.types import BBox, FeatureId, JsonArray, JsonObject, JsonValue

T = TypeVar("T")


@contextmanager
def error_location(*loc: int | str) -> Generator[None, None, None]:
    """prepend `loc` to the location of any GeoJsonError raised inside the block"""
    try:
        yield
    except GeoJsonError as e:
        e.loc = (*loc, *e.loc)
        raise


def as_finite_float(value: JsonValue) -> float | None:
    # bool is a subclass of int, but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def expect_object(value: JsonValue) -> JsonObject:
    if not isinstance(value, dict):
        raise ExpectedObjectValueError()
    return value


def expect_array(value: JsonValue) -> JsonArray:
    if not isinstance(value, (list, tuple)):
        raise ExpectedArrayValueError()
    return value


def expect_property(obj: JsonObject, name: str) -> JsonValue:
    if name not in obj:
        raise ExpectedPropertyError(name)
    return obj.pop(name)


def peek_type(obj: JsonObject) -> str:
    type_ = obj.get("type")
    if not isinstance(type_, str):
        raise ExpectedPropertyError("type")
    return type_


def expect_type(obj: JsonObject) -> str:
    type_ = peek_type(obj)
    del obj["type"]
    return type_


def optional_bbox(obj: JsonObject) -> BBox | None:
    if "bbox" not in obj:
        return None
    bbox_json = obj.pop("bbox")
    if not isinstance(bbox_json, (list, tuple)):
        raise BboxExpectedArrayError(loc=("bbox",))
    bbox = []
    for index, item in enumerate(bbox_json):
        value = as_finite_float(item)
        if value is None:
            raise BboxExpectedNumericValuesError(loc=("bbox", index))
        bbox.append(value)
    return bbox


def optional_properties(obj: JsonObject) -> dict[str, Any] | None:
    """`properties` is a required member, its value may be null"""
    properties = expect_property(obj, "properties")
    if properties is None:
        return None
    if isinstance(properties, dict):
        return properties
    raise PropertiesExpectedObjectOrNullError(loc=("properties",))


def optional_id(obj: JsonObject) -> FeatureId | None:
    if "id" not in obj:
        return None
    id_ = obj.pop("id")
    if isinstance(id_, str):
        return id_
    if as_finite_float(id_) is not None:
        return id_
    raise InvalidIdentifierTypeError(loc=("id",))


def remaining_as_foreign_members(obj: JsonObject) -> JsonObject | None:
    if not obj:
        return None
    return obj


def required_geometry(obj: JsonObject, decode: Callable[[JsonObject], Geometry]) -> Geometry | None:
    geometry = expect_property(obj, "geometry")
    if geometry is None:
        return None
    if not isinstance(geometry, dict):
        raise InvalidGeometryValueError(loc=("geometry",))
    with error_location("geometry"):
        return decode(geometry)


def _decode_members(obj: JsonObject, name: str, decode: Callable[[JsonObject], T]) -> list[T]:
    value = expect_property(obj, name)
    with error_location(name):
        items = expect_array(value)
    result = []
    for index, item in enumerate(items):
        with error_location(name, index):
            result.append(decode(expect_object(item)))
    return result


def required_geometries(obj: JsonObject, decode: Callable[[JsonObject], Geometry]) -> list[Geometry]:
    return _decode_members(obj, "geometries", decode)


def required_features(obj: JsonObject, decode: Callable[[JsonObject], Feature]) -> list[Feature]:
    return _decode_members(obj, "features", decode)
