from ...client import Client
from ...models.action_response import ActionResponse
from ...types import RequestTemplate
from .._decode import parse_action_response


def _get_kwargs(
    *,
    client: Client,
) -> RequestTemplate:
    return client.template("/v1/kill")


def _parse_response(*, client: Client, content: bytes) -> ActionResponse:
    return parse_action_response(client=client, content=content)


def sync(
    *,
    client: Client,
) -> ActionResponse:
    """Kill

     Force-stop a VPS that does not respond to stop.

    Raises:
        errors.RaceTimeout: If no attempt succeeds within Client.deadline.
        errors.ResponseDecodeError: If the winning body is not a valid action response.
        errors.ApiError: If the API reports an error and Client.raise_on_api_error is True.

    Returns:
        ActionResponse
    """

    content = client.race_sync(_get_kwargs(client=client))
    return _parse_response(client=client, content=content)


async def asyncio(
    *,
    client: Client,
) -> ActionResponse:
    """Kill

     Force-stop a VPS that does not respond to stop.

    Raises:
        errors.RaceTimeout: If no attempt succeeds within Client.deadline.
        errors.ResponseDecodeError: If the winning body is not a valid action response.
        errors.ApiError: If the API reports an error and Client.raise_on_api_error is True.

    Returns:
        ActionResponse
    """

    content = await client.race(_get_kwargs(client=client))
    return _parse_response(client=client, content=content)
