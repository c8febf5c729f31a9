from pydantic import ValidationError

from spotbus.errors import HttpStatusError, PayloadError


def parse_model(model, data, what):
    """
    Validates decoded JSON against a pydantic model.
    :raises PayloadError: if a field is missing or has the wrong type.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PayloadError(f"{what}: {e}") from e


def read_json(response, what):
    """
    Returns the decoded JSON body of a requests.Response.
    :raises HttpStatusError: for any non-2xx status.
    :raises PayloadError: if the body is not JSON.
    """
    if not 200 <= response.status_code < 300:
        raise HttpStatusError(response.status_code, response.text)
    try:
        return response.json()
    except ValueError as e:
        raise PayloadError(f"{what}: response is not valid JSON") from e
