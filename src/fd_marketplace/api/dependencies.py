"""FastAPI dependency providing the marketplace client.

Endpoint tests replace this via app.dependency_overrides.
"""

from src.fd_common.http_client import get_http_client
from src.fd_marketplace.infrastructure.opensea_client import OpenSeaClient


def get_marketplace_client() -> OpenSeaClient:
    return OpenSeaClient(get_http_client())
