import pytest
from pydantic import ValidationError

from geojson_codec.models import (
    ExpectedPropertyError,
    Feature,
    FeatureCollection,
    GeoJsonError,
    GeometryCollection,
    LineString,
    Point,
    Polygon,
    SchemaError,
    UnknownTypeError,
)


def test_empty_foreign_members_normalized_to_none():
    assert Point(coordinates=(1.0, 2.0), foreign_members={}).foreign_members is None
    assert Feature(foreign_members={}) == Feature()


def test_position_is_tuple_of_floats():
    point = Point(coordinates=[1, 2])
    assert point.coordinates == (1.0, 2.0)
    assert all(isinstance(x, float) for x in point.coordinates)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_position_must_be_finite(value):
    with pytest.raises(ValidationError):
        Point(coordinates=(1.0, value))


@pytest.mark.parametrize(
    ("coordinates", "bbox"),
    [
        (("1", "2"), None),
        ((True, 1.0), None),
        ((True, False), None),
        ((1.0, 2.0), ["0", 0, 1, 1]),
        ((1.0, 2.0), [False, 0, 1, 1]),
    ],
)
def test_position_and_bbox_reject_non_numbers(coordinates, bbox):
    with pytest.raises(ValidationError):
        Point(coordinates=coordinates, bbox=bbox)


def test_models_are_frozen():
    point = Point(coordinates=(1.0, 2.0))
    with pytest.raises(ValidationError):
        point.coordinates = (3.0, 4.0)
    rebuilt = point.model_copy(update={"coordinates": (3.0, 4.0)})
    assert rebuilt.coordinates == (3.0, 4.0)
    assert point.coordinates == (1.0, 2.0)


def test_geometry_collection_accepts_nested_collections():
    gc = GeometryCollection(geometries=[GeometryCollection(geometries=[Point(coordinates=(1.0, 2.0))])])
    assert isinstance(gc.geometries[0], GeometryCollection)
    assert isinstance(gc.geometries[0].geometries[0], Point)


def test_geometry_union_keeps_variant():
    line = LineString(coordinates=[(1.0, 2.0), (3.0, 4.0)])
    feature = Feature(geometry=line)
    assert type(feature.geometry) is LineString


def test_feature_id_types():
    assert Feature(id=1).id == 1
    assert type(Feature(id=1).id) is int
    assert Feature(id="a").id == "a"
    with pytest.raises(ValidationError):
        Feature(id=True)


def test_feature_from_geometry():
    polygon = Polygon(coordinates=[[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]])
    feature = Feature.from_geometry(polygon)
    assert feature.geometry == polygon
    assert feature.properties is None
    assert feature.id is None


def test_feature_property():
    feature = Feature(properties={"name": "Dam", "empty": None})
    assert feature.property("name") == "Dam"
    assert feature.property("missing") is None
    assert feature.contains_property("empty")
    assert not feature.contains_property("missing")
    assert not Feature().contains_property("name")
    assert Feature().property("name") is None


def test_feature_collection_keeps_order():
    features = [Feature(id=2), Feature(id=1), Feature(id=2)]
    fc = FeatureCollection(features=features)
    assert [x.id for x in fc.features] == [2, 1, 2]


def test_error_hierarchy():
    error = ExpectedPropertyError("type")
    assert isinstance(error, SchemaError)
    assert isinstance(error, GeoJsonError)
    assert error.type_str == "geojson-codec/expected-property"
    assert str(error) == "expected property `type`"


def test_error_str_with_location():
    error = UnknownTypeError("Circle")
    error.loc = ("features", 0, "geometry")
    assert str(error) == "unknown GeoJSON type `Circle` (at features[0].geometry)"
