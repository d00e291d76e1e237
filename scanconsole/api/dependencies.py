# scanconsole/api/dependencies.py
from functools import lru_cache

import httpx
from fastapi import Depends, Request

from scanconsole.core.constants import ScanType
from scanconsole.core.encryption import EncryptionService
from scanconsole.core.exceptions import NotFoundError
from scanconsole.services.scan_listing import ScanListingService
from scanconsole.services.search_client import SearchClient


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared search service client created in the app lifespan"""
    return request.app.state.http_client


def get_search_client(http: httpx.AsyncClient = Depends(get_http_client)) -> SearchClient:
    return SearchClient(http)


def get_listing_service(client: SearchClient = Depends(get_search_client)) -> ScanListingService:
    return ScanListingService(client)


@lru_cache()
def get_encryption() -> EncryptionService:
    return EncryptionService()


def get_scan_type(scan_type: str) -> ScanType:
    """Resolve the ``{scan_type}`` path segment (``secret``, ``malware``, ...)"""
    try:
        return ScanType.from_slug(scan_type)
    except ValueError:
        raise NotFoundError(f"Unknown scan type '{scan_type}'")
