import math

import pytest

from geojson_codec.coordinates import (
    compute_bbox,
    decode_coordinates,
    decode_position,
    encode_coordinates,
    encode_position,
    iter_positions,
)
from geojson_codec.models import (
    ExpectedArrayValueError,
    ExpectedF64ValueError,
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Point,
)


@pytest.mark.parametrize(
    ("value", "expectation"),
    [
        ([1, 2], (1.0, 2.0)),
        ([4.8, 52.3, -1.5], (4.8, 52.3, -1.5)),
        ([1.0, 2.0, 3.0, 4.0], (1.0, 2.0, 3.0, 4.0)),
        ((1.0, 2.0), (1.0, 2.0)),
        ([], ()),
    ],
)
def test_decode_position(value, expectation):
    assert decode_position(value) == expectation


@pytest.mark.parametrize("value", [{"x": 1}, "1,2", 1.0, None])
def test_decode_position_expects_array(value):
    with pytest.raises(ExpectedArrayValueError):
        decode_position(value)


@pytest.mark.parametrize(
    ("value", "index"),
    [
        ([1.0, "2"], 1),
        ([True, 2.0], 0),
        ([1.0, None], 1),
        ([1.0, [2.0]], 1),
        ([1.0, 2.0, math.nan], 2),
        ([math.inf, 2.0], 0),
    ],
)
def test_decode_position_expects_numbers(value, index):
    with pytest.raises(ExpectedF64ValueError) as exc_info:
        decode_position(value)
    assert exc_info.value.loc == (index,)


def test_encode_position_is_inverse_of_decode():
    position = (5.387, 52.156, 43.2)
    assert encode_position(position) == [5.387, 52.156, 43.2]
    assert decode_position(encode_position(position)) == position


def test_decode_coordinates_depth_three():
    result = decode_coordinates([[[[1, 2], [3, 4]]]], 3)
    assert result == [[[(1.0, 2.0), (3.0, 4.0)]]]


@pytest.mark.parametrize(
    ("value", "depth"),
    [
        ([[1, 2]], 3),
        ([1, 2], 1),
        ([[1, 2], [3, 4]], 2),
        (None, 2),
    ],
)
def test_decode_coordinates_wrong_depth(value, depth):
    with pytest.raises(ExpectedArrayValueError):
        decode_coordinates(value, depth)


def test_decode_coordinates_reports_first_error_location():
    value = [[[0, 0], [1, 1]], [[2, 2], [3, "x"]], [[4, None]]]
    with pytest.raises(ExpectedF64ValueError) as exc_info:
        decode_coordinates(value, 2)
    assert exc_info.value.loc == (1, 1, 1)


def test_encode_coordinates_produces_lists():
    coordinates = [[(0.0, 0.0), (1.0, 1.0)], [(2.0, 2.0)]]
    result = encode_coordinates(coordinates, 2)
    assert result == [[[0.0, 0.0], [1.0, 1.0]], [[2.0, 2.0]]]
    assert isinstance(result[0][0], list)
    assert decode_coordinates(result, 2) == coordinates


def test_iter_positions_feature_collection():
    fc = FeatureCollection(
        features=[
            Feature(geometry=Point(coordinates=(1.0, 2.0))),
            Feature(geometry=None),
            Feature(
                geometry=GeometryCollection(
                    geometries=[
                        LineString(coordinates=[(3.0, 4.0), (5.0, 6.0)]),
                        MultiPolygon(coordinates=[[[(7.0, 8.0)]]]),
                    ]
                )
            ),
        ]
    )
    assert list(iter_positions(fc)) == [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0), (7.0, 8.0)]


def test_compute_bbox_2d():
    line = LineString(coordinates=[(3.0, 4.0), (-5.0, 6.0), (1.0, -2.0)])
    assert compute_bbox(line) == [-5.0, -2.0, 3.0, 6.0]


def test_compute_bbox_3d():
    line = LineString(coordinates=[(3.0, 4.0, 10.0), (-5.0, 6.0, -1.0)])
    assert compute_bbox(line) == [-5.0, 4.0, -1.0, 3.0, 6.0, 10.0]


def test_compute_bbox_empty():
    assert compute_bbox(GeometryCollection(geometries=[])) is None
    assert compute_bbox(Feature()) is None


def test_compute_bbox_unsupported_dimension():
    with pytest.raises(ValueError, match="either 2 or 3"):
        compute_bbox(Point(coordinates=(1.0, 2.0, 3.0, 4.0)))


def test_compute_bbox_mixed_dimensions():
    line = LineString(coordinates=[(0.0, 0.0), (1.0, 1.0, 9.0)])
    with pytest.raises(ValueError, match="mixed coordinate dimensions"):
        compute_bbox(line)
