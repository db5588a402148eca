"""
Hub API Client.

- schemas.py: Profile, VisitPerson, HubVisit
- transport.py: bearer-authenticated httpx transport with JSON decoding
- client.py: the five hub operations
"""

from modules.api.client import HubClient, get_hub_client
from modules.api.schemas import HubVisit, Profile, VisitPerson
from modules.api.transport import HubTransport

__all__ = [
    "HubClient",
    "HubTransport",
    "HubVisit",
    "Profile",
    "VisitPerson",
    "get_hub_client",
]
