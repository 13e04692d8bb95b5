"""
In-memory stand-in for ChallongeGateway.
"""

from typing import Any, Optional


class FakeGateway:
    """Replays queued response bodies in order and records every call."""

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.calls: list[tuple[str, str, dict]] = []

    async def request(
        self, method: str, route: str, params: Optional[dict[str, Any]] = None
    ) -> Any:
        self.calls.append((method, route, dict(params or {})))
        body = self.responses.pop(0)
        if isinstance(body, Exception):
            raise body
        return body
