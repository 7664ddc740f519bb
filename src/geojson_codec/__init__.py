import logging

from geojson_codec.codec import (
    decode_feature,
    decode_feature_collection,
    decode_geometry,
    dispatch,
    dumps,
    encode,
    encode_feature,
    encode_feature_collection,
    encode_geometry,
    loads,
)
from geojson_codec.coordinates import (
    compute_bbox,
    decode_coordinates,
    decode_position,
    encode_coordinates,
    encode_position,
    iter_positions,
)
from geojson_codec.interop import (
    from_geojson_pydantic,
    from_shapely,
    to_geojson_pydantic,
    to_shapely,
)
from geojson_codec.models import (
    BboxExpectedArrayError,
    BboxExpectedNumericValuesError,
    EncodeError,
    ExpectedArrayValueError,
    ExpectedF64ValueError,
    ExpectedObjectValueError,
    ExpectedPropertyError,
    ExpectedStringValueError,
    Feature,
    FeatureCollection,
    ForeignMemberCollisionError,
    GeoJsonError,
    GeoJsonExpectedObjectError,
    GeojsonObject,
    Geometry,
    GeometryCollection,
    InvalidGeometryValueError,
    InvalidIdentifierTypeError,
    LineString,
    MalformedJsonError,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    NestingDepthExceededError,
    Point,
    Polygon,
    PropertiesExpectedObjectOrNullError,
    SchemaError,
    StructuralError,
    UnexpectedTypeError,
    UnknownTypeError,
)
from geojson_codec.settings import app_settings

logging.getLogger(__name__).setLevel(app_settings.log_level.upper())

__all__ = [
    "BboxExpectedArrayError",
    "BboxExpectedNumericValuesError",
    "EncodeError",
    "ExpectedArrayValueError",
    "ExpectedF64ValueError",
    "ExpectedObjectValueError",
    "ExpectedPropertyError",
    "ExpectedStringValueError",
    "Feature",
    "FeatureCollection",
    "ForeignMemberCollisionError",
    "GeoJsonError",
    "GeoJsonExpectedObjectError",
    "GeojsonObject",
    "Geometry",
    "GeometryCollection",
    "InvalidGeometryValueError",
    "InvalidIdentifierTypeError",
    "LineString",
    "MalformedJsonError",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "NestingDepthExceededError",
    "Point",
    "Polygon",
    "PropertiesExpectedObjectOrNullError",
    "SchemaError",
    "StructuralError",
    "UnexpectedTypeError",
    "UnknownTypeError",
    "compute_bbox",
    "decode_coordinates",
    "decode_feature",
    "decode_feature_collection",
    "decode_geometry",
    "decode_position",
    "dispatch",
    "dumps",
    "encode",
    "encode_coordinates",
    "encode_feature",
    "encode_feature_collection",
    "encode_geometry",
    "encode_position",
    "from_geojson_pydantic",
    "from_shapely",
    "iter_positions",
    "loads",
    "to_geojson_pydantic",
    "to_shapely",
]
