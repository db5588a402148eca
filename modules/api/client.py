"""
Hub API Client.

Typed operations over the hub check-in API. Each operation is a single
request/response exchange; failures surface as ApplicationError subclasses
(NetworkError, ApiStatusError, ParseError). The only status code treated
specially is 404 on get_visit, which means "no visit".
"""

from types import TracebackType

import httpx

from modules.api.schemas import HubVisit, Profile
from modules.api.transport import HubTransport
from modules.core.config import get_token
from modules.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def _visit_path(person_id: int, date: str) -> str:
    return f"/hub_visits/{person_id}/{date}"


class HubClient:
    """
    Client for the hub visits API.

    Usage:
        async with HubClient(HubTransport(token)) as client:
            me = await client.get_current_user()
            visit = await client.get_visit(me.id, "2024-01-15")
    """

    def __init__(self, transport: HubTransport) -> None:
        self.transport = transport

    async def __aenter__(self) -> "HubClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP connection."""
        await self.transport.close()

    async def get_current_user(self) -> Profile:
        """Fetch the profile of the token's owner."""
        response = await self.transport.get("/profiles/me")
        self.transport.ensure_success(response)
        return self.transport.decode(response, Profile)

    async def get_visit(self, person_id: int, date: str) -> HubVisit | None:
        """
        Fetch one person's visit for a date.

        Returns None when the server answers 404, i.e. no visit exists.
        """
        response = await self.transport.get(_visit_path(person_id, date))
        if response.status_code == httpx.codes.NOT_FOUND:
            log_with_source(
                logger, "api", "debug", "No visit found", person_id=person_id, date=date,
            )
            return None
        self.transport.ensure_success(response)
        return self.transport.decode(response, HubVisit)

    async def get_visits(self, date: str) -> list[HubVisit]:
        """List everyone's visits for a date, in the order the server returns them."""
        response = await self.transport.get("/hub_visits", params={"date": date})
        self.transport.ensure_success(response)
        return self.transport.decode(response, list[HubVisit])

    async def create_or_update_visit(
        self,
        person_id: int,
        date: str,
        notes: str | None = None,
    ) -> HubVisit:
        """
        Create or replace a visit.

        The body is {"notes": notes} when notes is given (even if empty),
        otherwise the request carries no body.
        """
        kwargs = {"json": {"notes": notes}} if notes is not None else {}
        response = await self.transport.patch(_visit_path(person_id, date), **kwargs)
        self.transport.ensure_success(response)
        return self.transport.decode(response, HubVisit)

    async def delete_visit(self, person_id: int, date: str) -> None:
        """Delete a visit. The response body is not read."""
        response = await self.transport.delete(_visit_path(person_id, date))
        self.transport.ensure_success(response)


def get_hub_client(token: str | None = None) -> HubClient:
    """
    Build a client from configuration.

    Args:
        token: Bearer token. If None, resolved from RC_TOKEN.

    Raises:
        ConfigurationError: If no token is available.
    """
    return HubClient(HubTransport(token if token is not None else get_token()))
