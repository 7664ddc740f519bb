from typing import Annotated, Any, TypeAlias, Union

from pydantic import Field

JsonValue: TypeAlias = Any  # noqa: UP040
JsonObject: TypeAlias = dict[str, Any]  # noqa: UP040
JsonArray: TypeAlias = Union[list[Any], tuple[Any, ...]]  # noqa: UP007, UP040

# accepts int and float, rejects str, bool, nan and inf
StrictFiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]

Position: TypeAlias = tuple[StrictFiniteFloat, ...]  # noqa: UP040
MultiPointCoords: TypeAlias = list[Position]  # noqa: UP040
LineStringCoords: TypeAlias = list[Position]  # noqa: UP040
MultiLineStringCoords: TypeAlias = list[list[Position]]  # noqa: UP040
PolygonCoords: TypeAlias = list[list[Position]]  # noqa: UP040
MultiPolygonCoords: TypeAlias = list[list[list[Position]]]  # noqa: UP040

BBox: TypeAlias = list[StrictFiniteFloat]  # noqa: UP040
FeatureId: TypeAlias = int | float | str  # noqa: UP040
