from ...client import Client
from ...models.service_info import ServiceInfo
from ...types import RequestTemplate
from .._decode import parse_service_info


def _get_kwargs(
    *,
    client: Client,
) -> RequestTemplate:
    return client.template("/v1/getServiceInfo")


def _parse_response(*, client: Client, content: bytes) -> ServiceInfo:
    return parse_service_info(client=client, content=content)


def sync(
    *,
    client: Client,
) -> ServiceInfo:
    """Get Service Info

     Plan, node, addresses and bandwidth usage of the VPS.

    Raises:
        errors.RaceTimeout: If no attempt succeeds within Client.deadline.
        errors.ResponseDecodeError: If the winning body is not a JSON object.
        errors.ApiError: If the API reports an error and Client.raise_on_api_error is True.

    Returns:
        ServiceInfo
    """

    content = client.race_sync(_get_kwargs(client=client))
    return _parse_response(client=client, content=content)


async def asyncio(
    *,
    client: Client,
) -> ServiceInfo:
    """Get Service Info

     Plan, node, addresses and bandwidth usage of the VPS.

    Returns:
        ServiceInfo
    """

    content = await client.race(_get_kwargs(client=client))
    return _parse_response(client=client, content=content)
