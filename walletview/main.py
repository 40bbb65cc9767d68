from contextlib import asynccontextmanager

from fastapi import FastAPI

from walletview import __version__
from walletview.core.config import get_settings
from walletview.core.logging_config import configure_logging
from walletview.infrastructure.database import init_db
from walletview.infrastructure.database.session import dispose_engine
from walletview.interfaces.http.routers import create_api_router, pages

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Wallet dashboard and transaction history",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(pages.router)

    return app


app = create_app()
