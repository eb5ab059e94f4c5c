from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes_products import router as products_router
from app.api.routes_system import router as system_router
from app.api.routes_transactions import router as transactions_router
from app.core.config import settings
from app.core.exceptions import BaseAppException
from app.core.logging import get_api_logger
from app.db.repositories.base import InventoryStore
from app.db.storage import open_store

logger = get_api_logger()


def _error_body(message: str, error: Optional[str] = None) -> dict:
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return body


def create_app(store: Optional[InventoryStore] = None) -> FastAPI:
    """Build the API. A given store is used as-is instead of probing DB_URL."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            await store.open()
            app.state.store = store
        else:
            app.state.store = await open_store()

        logger.info(f"Server is running on port {settings.PORT}")
        logger.info(f"Storage mode: {app.state.store.mode}")
        logger.info(f"API available at: http://localhost:{settings.PORT}/api")

        yield

        await app.state.store.close()

    app = FastAPI(title="Inventory Service", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products_router)
    app.include_router(transactions_router)
    app.include_router(system_router)

    @app.exception_handler(BaseAppException)
    async def app_exception_handler(request: Request, exc: BaseAppException):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message} {exc.details}")
        else:
            logger.warning(f"{request.method} {request.url.path}: HTTP {exc.status_code} {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.details.get("error")),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = "; ".join(
            f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        logger.warning(f"{request.method} {request.url.path}: invalid payload ({error})")
        return JSONResponse(status_code=400, content=_error_body("Invalid request payload", error))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content=_error_body("Internal server error", str(exc)))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
