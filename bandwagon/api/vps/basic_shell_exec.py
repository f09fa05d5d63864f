from ...client import Client
from ...models.action_response import ActionResponse
from ...types import RequestTemplate
from .._decode import parse_action_response


def _get_kwargs(
    command: str,
    *,
    client: Client,
) -> RequestTemplate:
    return client.template("/v1/basicShell/exec", command=command)


def _parse_response(*, client: Client, content: bytes) -> ActionResponse:
    return parse_action_response(client=client, content=content)


def sync(
    command: str,
    *,
    client: Client,
) -> ActionResponse:
    """Basic Shell Exec

     Run a shell command on the VPS. The command output comes back in
     ``message``; a non-zero ``error`` is the command's exit status.

     Every attempt of the race sends the command, so only idempotent
     commands are safe to run this way.

    Args:
        command (str):

    Raises:
        errors.RaceTimeout: If no attempt succeeds within Client.deadline.
        errors.ResponseDecodeError: If the winning body is not a valid action response.
        errors.ApiError: If the API reports an error and Client.raise_on_api_error is True.

    Returns:
        ActionResponse
    """

    content = client.race_sync(_get_kwargs(command, client=client))
    return _parse_response(client=client, content=content)


async def asyncio(
    command: str,
    *,
    client: Client,
) -> ActionResponse:
    """Basic Shell Exec

     Run a shell command on the VPS. See ``sync``.

    Args:
        command (str):

    Returns:
        ActionResponse
    """

    content = await client.race(_get_kwargs(command, client=client))
    return _parse_response(client=client, content=content)
