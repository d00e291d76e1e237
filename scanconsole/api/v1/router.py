from fastapi import APIRouter
from scanconsole.api.v1 import settings, registry, scans

api_router = APIRouter()

api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(registry.router, prefix="/registryaccount", tags=["registry"])
api_router.include_router(scans.router, prefix="/scans", tags=["scans"])
