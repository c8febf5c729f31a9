from pydantic import BaseModel, ConfigDict, Field, StrictStr, conint

from spotbus.payload import parse_model

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class AuthToken(BaseModel):
    """Represents a client-credentials token that can be used to access Spotify."""

    model_config = ConfigDict(frozen=True)

    access_token: StrictStr = Field(description="Bearer token for the Web API")
    token_type: StrictStr = Field(description="Token type (always Bearer)")
    expires_in: conint(strict=True, ge=INT32_MIN, le=INT32_MAX) = Field(
        description="Lifetime of the token in seconds"
    )

    @classmethod
    def from_json(cls, data) -> "AuthToken":
        return parse_model(cls, data, "token")
