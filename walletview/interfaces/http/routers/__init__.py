from fastapi import APIRouter

from walletview.interfaces.http.routers import pages, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
    return router


__all__ = [
    "create_api_router",
    "pages",
]
