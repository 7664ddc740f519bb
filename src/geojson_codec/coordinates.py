from collections.abc import Generator
from functools import partial
from typing import Any

from geojson_codec.constants import COORDINATE_DEPTHS, THREE_DIMENSIONAL, TWO_DIMENSIONAL
from geojson_codec.models import (
    ExpectedF64ValueError,
    Feature,
    FeatureCollection,
    GeojsonObject,
    GeometryCollection,
)
from geojson_codec.types import BBox, JsonValue, Position
from geojson_codec.util import as_finite_float, error_location, expect_array


def decode_position(value: JsonValue) -> Position:
    """decode a JSON array of numbers into a position, any number of components is accepted"""
    array = expect_array(value)
    position = []
    for index, item in enumerate(array):
        component = as_finite_float(item)
        if component is None:
            raise ExpectedF64ValueError(loc=(index,))
        position.append(component)
    return tuple(position)


def encode_position(position: Position) -> list[float]:
    return list(position)


def decode_coordinates(value: JsonValue, depth: int) -> Any:  # noqa: ANN401
    """decode GeoJSON coordinates nested `depth` arrays deep, depth 0 being a single position

    Args:
        value: JSON value of the `coordinates` member
        depth (int): number of array levels before a position is reached

    Returns:
        position, or (nested) list of positions
    """
    if depth == 0:
        return decode_position(value)
    array = expect_array(value)
    coordinates = []
    for index, item in enumerate(array):
        with error_location(index):
            coordinates.append(decode_coordinates(item, depth - 1))
    return coordinates


def encode_coordinates(coordinates: Any, depth: int) -> list:  # noqa: ANN401
    if depth == 0:
        return encode_position(coordinates)
    _self = partial(encode_coordinates, depth=depth - 1)
    return list(map(_self, coordinates))


def explode(coordinates: Any, depth: int) -> Generator[Position, None, None]:  # noqa: ANN401
    if depth == 0:
        yield coordinates
    else:
        for item in coordinates:
            yield from explode(item, depth - 1)


def iter_positions(obj: GeojsonObject) -> Generator[Position, None, None]:
    """yield all positions of a geometry, feature or feature collection in document order"""
    if isinstance(obj, FeatureCollection):
        for feature in obj.features:
            yield from iter_positions(feature)
    elif isinstance(obj, Feature):
        if obj.geometry is not None:
            yield from iter_positions(obj.geometry)
    elif isinstance(obj, GeometryCollection):
        for geometry in obj.geometries:
            yield from iter_positions(geometry)
    else:
        yield from explode(obj.coordinates, COORDINATE_DEPTHS[obj.type])


def compute_bbox(obj: GeojsonObject) -> BBox | None:
    """compute bounding box of all positions in obj, returns None when obj has no positions

    Raises:
        ValueError: positions are not all of the same dimension, or the dimension is not 2 or 3
    """
    positions = list(iter_positions(obj))
    dimensions = {len(x) for x in positions}
    if len(dimensions) > 1:
        raise ValueError(f"mixed coordinate dimensions: {sorted(dimensions)}")
    coordinate_tuples = list(zip(*positions))
    if len(coordinate_tuples) == 0:
        return None
    if len(coordinate_tuples) == TWO_DIMENSIONAL:
        x, y = coordinate_tuples
        return [min(x), min(y), max(x), max(y)]
    elif len(coordinate_tuples) == THREE_DIMENSIONAL:
        x, y, z = coordinate_tuples
        return [min(x), min(y), min(z), max(x), max(y), max(z)]
    else:
        raise ValueError(f"expected dimension of coordinates is either 2 or 3, got {len(coordinate_tuples)}")
