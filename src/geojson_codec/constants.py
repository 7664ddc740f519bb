POINT = "Point"
MULTI_POINT = "MultiPoint"
LINE_STRING = "LineString"
MULTI_LINE_STRING = "MultiLineString"
POLYGON = "Polygon"
MULTI_POLYGON = "MultiPolygon"
GEOMETRY_COLLECTION = "GeometryCollection"
FEATURE = "Feature"
FEATURE_COLLECTION = "FeatureCollection"

# number of array levels between the "coordinates" member and a bare position
COORDINATE_DEPTHS = {
    POINT: 0,
    MULTI_POINT: 1,
    LINE_STRING: 1,
    MULTI_LINE_STRING: 2,
    POLYGON: 2,
    MULTI_POLYGON: 3,
}
GEOMETRY_TYPES = (*COORDINATE_DEPTHS, GEOMETRY_COLLECTION)
GEOJSON_TYPES = (*GEOMETRY_TYPES, FEATURE, FEATURE_COLLECTION)

RESERVED_GEOMETRY_KEYS = ("type", "coordinates", "bbox")
RESERVED_GEOMETRY_COLLECTION_KEYS = ("type", "geometries", "bbox")
RESERVED_FEATURE_KEYS = ("type", "geometry", "properties", "id", "bbox")
RESERVED_FEATURE_COLLECTION_KEYS = ("type", "features", "bbox")

COLLISION_ERROR = "error"
COLLISION_OVERWRITE = "overwrite"

TWO_DIMENSIONAL = 2
THREE_DIMENSIONAL = 3
