from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from geojson_codec.constants import COLLISION_ERROR, COLLISION_OVERWRITE

CollisionPolicy = Literal["error", "overwrite"]


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(populate_by_name=True)

    log_level: str = Field(alias="LOG_LEVEL", default="WARNING")
    foreign_member_collision: CollisionPolicy = Field(
        alias="FOREIGN_MEMBER_COLLISION",
        default=COLLISION_ERROR,
        description=f"what to do when a foreign member uses a reserved key while encoding, either `{COLLISION_ERROR}` (raise) or `{COLLISION_OVERWRITE}` (foreign member wins)",
    )
    max_nesting_depth: int | None = Field(
        alias="MAX_NESTING_DEPTH",
        default=None,
        ge=1,
        description="maximum nesting depth of GeometryCollection objects while decoding, unbounded when not set",
    )


app_settings = AppSettings()
