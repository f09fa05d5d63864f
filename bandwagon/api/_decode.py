import json
from typing import Any, Dict

from ..client import Client
from ..errors import ApiError, ResponseDecodeError
from ..models import ActionResponse, ServiceInfo


def decode_object(content: bytes) -> Dict[str, Any]:
    try:
        data = json.loads(content)
    except ValueError as e:
        raise ResponseDecodeError(content, str(e)) from e
    if not isinstance(data, dict):
        raise ResponseDecodeError(content, f"expected a JSON object, got {type(data).__name__}")
    return data


def _check_error(client: Client, code: Any, message: Any = None) -> None:
    if client.raise_on_api_error and isinstance(code, int) and code != 0:
        raise ApiError(code, message if isinstance(message, str) else None)


def parse_action_response(*, client: Client, content: bytes) -> ActionResponse:
    data = decode_object(content)
    try:
        parsed = ActionResponse.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ResponseDecodeError(content, f"invalid action response: {e!r}") from e
    _check_error(client, parsed.error, parsed.message)
    return parsed


def parse_service_info(*, client: Client, content: bytes) -> ServiceInfo:
    parsed = ServiceInfo.from_dict(decode_object(content))
    _check_error(client, parsed.error, parsed.additional_properties.get("message"))
    return parsed
