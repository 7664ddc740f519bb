import json
import logging
from functools import partial
from typing import Any

from geojson_codec.constants import (
    COLLISION_ERROR,
    COLLISION_OVERWRITE,
    COORDINATE_DEPTHS,
    FEATURE,
    FEATURE_COLLECTION,
    GEOJSON_TYPES,
    GEOMETRY_COLLECTION,
    GEOMETRY_TYPES,
    LINE_STRING,
    MULTI_LINE_STRING,
    MULTI_POINT,
    MULTI_POLYGON,
    POINT,
    POLYGON,
    RESERVED_FEATURE_COLLECTION_KEYS,
    RESERVED_FEATURE_KEYS,
    RESERVED_GEOMETRY_COLLECTION_KEYS,
    RESERVED_GEOMETRY_KEYS,
)
from geojson_codec.coordinates import decode_coordinates, encode_coordinates
from geojson_codec.models import (
    Feature,
    FeatureCollection,
    ForeignMemberCollisionError,
    GeoJsonError,
    GeoJsonExpectedObjectError,
    GeojsonObject,
    Geometry,
    GeometryCollection,
    LineString,
    MalformedJsonError,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    NestingDepthExceededError,
    Point,
    Polygon,
    UnexpectedTypeError,
    UnknownTypeError,
    _GeoJsonBase,
)
from geojson_codec.settings import app_settings
from geojson_codec.types import JsonObject, JsonValue
from geojson_codec.util import (
    error_location,
    expect_object,
    expect_property,
    expect_type,
    optional_bbox,
    optional_id,
    optional_properties,
    peek_type,
    remaining_as_foreign_members,
    required_features,
    required_geometries,
    required_geometry,
)

logger = logging.getLogger(__name__)

GEOMETRY_CLASSES: dict[str, type[_GeoJsonBase]] = {
    POINT: Point,
    MULTI_POINT: MultiPoint,
    LINE_STRING: LineString,
    MULTI_LINE_STRING: MultiLineString,
    POLYGON: Polygon,
    MULTI_POLYGON: MultiPolygon,
}


def _expect_type_in(obj: JsonObject, expected: tuple[str, ...], family: str) -> str:
    type_ = expect_type(obj)
    if type_ not in GEOJSON_TYPES:
        raise UnknownTypeError(type_)
    if type_ not in expected:
        raise UnexpectedTypeError(family, type_)
    return type_


def _resolve_max_depth(max_depth: int | None) -> int | None:
    return max_depth if max_depth is not None else app_settings.max_nesting_depth


def _decode_geometry(value: JsonValue, level: int, max_depth: int | None) -> Geometry:
    # shallow copy, extraction consumes the members of the object
    obj = dict(expect_object(value))
    type_ = _expect_type_in(obj, GEOMETRY_TYPES, "Geometry")
    bbox = optional_bbox(obj)

    if type_ == GEOMETRY_COLLECTION:
        if max_depth is not None and level >= max_depth:
            raise NestingDepthExceededError(max_depth)
        decode = partial(_decode_geometry, level=level + 1, max_depth=max_depth)
        geometries = required_geometries(obj, decode)
        return GeometryCollection(
            geometries=geometries,
            bbox=bbox,
            foreign_members=remaining_as_foreign_members(obj),
        )

    coordinates_json = expect_property(obj, "coordinates")
    with error_location("coordinates"):
        coordinates = decode_coordinates(coordinates_json, COORDINATE_DEPTHS[type_])
    return GEOMETRY_CLASSES[type_](
        coordinates=coordinates,
        bbox=bbox,
        foreign_members=remaining_as_foreign_members(obj),
    )


def decode_geometry(value: JsonValue, *, max_depth: int | None = None) -> Geometry:
    return _decode_geometry(value, 0, _resolve_max_depth(max_depth))


def decode_feature(value: JsonValue, *, max_depth: int | None = None) -> Feature:
    obj = dict(expect_object(value))
    _expect_type_in(obj, (FEATURE,), FEATURE)
    bbox = optional_bbox(obj)
    decode = partial(decode_geometry, max_depth=max_depth)
    geometry = required_geometry(obj, decode)
    id_ = optional_id(obj)
    properties = optional_properties(obj)
    return Feature(
        geometry=geometry,
        id=id_,
        properties=properties,
        bbox=bbox,
        foreign_members=remaining_as_foreign_members(obj),
    )


def decode_feature_collection(value: JsonValue, *, max_depth: int | None = None) -> FeatureCollection:
    obj = dict(expect_object(value))
    _expect_type_in(obj, (FEATURE_COLLECTION,), FEATURE_COLLECTION)
    bbox = optional_bbox(obj)
    decode = partial(decode_feature, max_depth=max_depth)
    features = required_features(obj, decode)
    return FeatureCollection(
        features=features,
        bbox=bbox,
        foreign_members=remaining_as_foreign_members(obj),
    )


def dispatch(value: JsonValue, *, max_depth: int | None = None) -> GeojsonObject:
    """decode a GeoJSON object of any type, the decoder is selected by the `type` member

    Raises:
        GeoJsonExpectedObjectError: value is not a JSON object
        ExpectedPropertyError: `type` member missing or not a string
        UnknownTypeError: `type` member is not one of the nine GeoJSON types
    """
    if not isinstance(value, dict):
        raise GeoJsonExpectedObjectError()
    type_ = peek_type(value)
    if type_ not in GEOJSON_TYPES:
        raise UnknownTypeError(type_)

    logger.debug("decoding %s object", type_)
    try:
        if type_ == FEATURE:
            return decode_feature(value, max_depth=max_depth)
        elif type_ == FEATURE_COLLECTION:
            return decode_feature_collection(value, max_depth=max_depth)
        return decode_geometry(value, max_depth=max_depth)
    except GeoJsonError as e:
        logger.debug("failed to decode %s object: %s", type_, e)
        raise


def _add_sidecar_members(
    obj: JsonObject,
    model: _GeoJsonBase,
    reserved: tuple[str, ...],
    on_collision: str | None,
) -> JsonObject:
    if model.bbox is not None:
        obj["bbox"] = list(model.bbox)
    if model.foreign_members is None:
        return obj

    policy = on_collision if on_collision is not None else app_settings.foreign_member_collision
    if policy not in (COLLISION_ERROR, COLLISION_OVERWRITE):
        raise ValueError(f"unknown foreign member collision policy: {policy}")
    for key, value in model.foreign_members.items():
        if key in reserved:
            if policy == COLLISION_ERROR:
                raise ForeignMemberCollisionError(key)
            logger.debug("foreign member %s overwrites reserved member", key)
        obj[key] = value
    return obj


def encode_geometry(geometry: Geometry, *, on_collision: str | None = None) -> JsonObject:
    if isinstance(geometry, GeometryCollection):
        obj: JsonObject = {
            "type": GEOMETRY_COLLECTION,
            "geometries": [encode_geometry(x, on_collision=on_collision) for x in geometry.geometries],
        }
        return _add_sidecar_members(obj, geometry, RESERVED_GEOMETRY_COLLECTION_KEYS, on_collision)

    obj = {
        "type": geometry.type,
        "coordinates": encode_coordinates(geometry.coordinates, COORDINATE_DEPTHS[geometry.type]),
    }
    return _add_sidecar_members(obj, geometry, RESERVED_GEOMETRY_KEYS, on_collision)


def encode_feature(feature: Feature, *, on_collision: str | None = None) -> JsonObject:
    obj: JsonObject = {
        "type": FEATURE,
        "geometry": (
            None if feature.geometry is None else encode_geometry(feature.geometry, on_collision=on_collision)
        ),
        "properties": None if feature.properties is None else dict(feature.properties),
    }
    if feature.id is not None:
        obj["id"] = feature.id
    return _add_sidecar_members(obj, feature, RESERVED_FEATURE_KEYS, on_collision)


def encode_feature_collection(feature_collection: FeatureCollection, *, on_collision: str | None = None) -> JsonObject:
    obj: JsonObject = {
        "type": FEATURE_COLLECTION,
        "features": [encode_feature(x, on_collision=on_collision) for x in feature_collection.features],
    }
    return _add_sidecar_members(obj, feature_collection, RESERVED_FEATURE_COLLECTION_KEYS, on_collision)


def encode(obj: GeojsonObject, *, on_collision: str | None = None) -> JsonObject:
    if isinstance(obj, FeatureCollection):
        return encode_feature_collection(obj, on_collision=on_collision)
    elif isinstance(obj, Feature):
        return encode_feature(obj, on_collision=on_collision)
    return encode_geometry(obj, on_collision=on_collision)


def loads(text: str | bytes, *, max_depth: int | None = None) -> GeojsonObject:
    try:
        value = json.loads(text)
    except ValueError as e:  # JSONDecodeError, or UnicodeDecodeError for bytes input
        raise MalformedJsonError(f"malformed JSON: {e}") from e
    if not isinstance(value, dict):
        raise GeoJsonExpectedObjectError()
    return dispatch(value, max_depth=max_depth)


def dumps(obj: GeojsonObject, *, on_collision: str | None = None, **kwargs: Any) -> str:  # noqa: ANN401
    return json.dumps(encode(obj, on_collision=on_collision), **kwargs)
