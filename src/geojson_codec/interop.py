"""Conversion between geojson_codec models and shapely / geojson-pydantic objects."""

import json
from typing import Any

from geojson_pydantic import Feature as PydanticFeature
from geojson_pydantic import FeatureCollection as PydanticFeatureCollection
from geojson_pydantic.geometries import parse_geometry_obj
from pydantic import BaseModel
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from geojson_codec.codec import decode_geometry, dispatch, encode, encode_geometry
from geojson_codec.models import Feature, FeatureCollection, GeojsonObject, Geometry

# members geojson-pydantic serializes as null when unset, a null `id` is not valid GeoJSON
NULLABLE_MEMBERS = ("bbox", "id")


def to_shapely(geometry: Geometry) -> BaseGeometry:
    return shape(encode_geometry(geometry))


def from_shapely(geometry: BaseGeometry) -> Geometry:
    return decode_geometry(mapping(geometry))


def to_geojson_pydantic(obj: GeojsonObject) -> BaseModel:
    """convert to the equivalent geojson-pydantic model, foreign members are dropped

    Raises:
        pydantic.ValidationError: obj violates a rule geojson-pydantic enforces, e.g. an unclosed polygon ring
    """
    data = encode(obj)
    if isinstance(obj, FeatureCollection):
        return PydanticFeatureCollection.model_validate(data)
    elif isinstance(obj, Feature):
        return PydanticFeature.model_validate(data)
    return parse_geometry_obj(data)


def _drop_null_members(data: Any) -> Any:  # noqa: ANN401
    if not isinstance(data, dict):
        return data
    result = {k: v for k, v in data.items() if not (k in NULLABLE_MEMBERS and v is None)}
    if isinstance(result.get("geometry"), dict):
        result["geometry"] = _drop_null_members(result["geometry"])
    for key in ("geometries", "features"):
        if isinstance(result.get(key), list):
            result[key] = list(map(_drop_null_members, result[key]))
    return result


def from_geojson_pydantic(model: BaseModel) -> GeojsonObject:
    data = json.loads(model.model_dump_json())
    return dispatch(_drop_null_members(data))
