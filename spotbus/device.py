from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, conint

from spotbus.payload import parse_model

VOLUME_MIN = -(2 ** 15)
VOLUME_MAX = 2 ** 15 - 1


class Device(BaseModel):
    """A playback device as returned by /v1/me/player/devices."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictStr
    is_active: StrictBool
    is_private_session: StrictBool
    is_restricted: StrictBool
    name: StrictStr
    # "type" in the API, renamed to avoid shadowing the builtin
    kind: StrictStr = Field(alias="type")
    volume_percent: conint(strict=True, ge=VOLUME_MIN, le=VOLUME_MAX)

    @classmethod
    def from_json(cls, data) -> "Device":
        return parse_model(cls, data, "device")


class Devices(BaseModel):
    model_config = ConfigDict(frozen=True)

    devices: Tuple[Device, ...]

    @classmethod
    def from_json(cls, data) -> "Devices":
        return parse_model(cls, data, "devices")
