"""Contains shared error types that can be raised from API functions"""

from typing import List, Optional


class BandwagonError(Exception):
    """Base class for every error raised by the bandwagon client."""


class RaceTimeout(BandwagonError):
    """Raised when no attempt of a race succeeded before its deadline.

    ``errors`` holds the attempt failures observed before the deadline, for
    diagnostics only; attempts still in flight when the deadline passed are
    not represented.
    """

    def __init__(self, deadline: float, fanout: int, errors: Optional[List[BaseException]] = None):
        self.deadline = deadline
        self.fanout = fanout
        self.errors = list(errors or [])
        super().__init__(
            f"race timed out after {deadline:.3f}s "
            f"({len(self.errors)}/{fanout} attempts failed)"
        )


class AllAttemptsFailed(BandwagonError):
    """Raised by fail-fast races once every attempt has reported failure."""

    def __init__(self, fanout: int, errors: List[BaseException]):
        self.fanout = fanout
        self.errors = list(errors)
        last = self.errors[-1] if self.errors else None
        super().__init__(f"all {fanout} attempts failed (last error: {last!r})")


class ResponseDecodeError(BandwagonError):
    """Raised when the winning body is not a JSON object"""

    def __init__(self, content: bytes, reason: str):
        self.content = content
        super().__init__(
            f"Could not decode response: {reason}\n\nResponse content:\n{content.decode(errors='ignore')}"
        )


class ApiError(BandwagonError):
    """Raised when the API reports a non-zero error code and Client.raise_on_api_error is True"""

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        self.message = message
        super().__init__(f"API error {code}: {message or 'no message'}")


__all__ = [
    "BandwagonError",
    "RaceTimeout",
    "AllAttemptsFailed",
    "ResponseDecodeError",
    "ApiError",
]
