from fastapi import APIRouter
from . import demo, health, wasm


def build_api_router(prefix: str) -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(health.router)
    api_router.include_router(demo.router)
    api_router.include_router(wasm.router)
    return api_router
