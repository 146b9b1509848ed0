from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .errors import ValidationError, ReceiptNotFound
from .routes.receipts import router as receipts_router
from .utils.logging import configure_logging, logger
from .vault.repository import ReceiptStore

def create_app(store: ReceiptStore | None = None) -> FastAPI:
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = FastAPI(title=settings.APP_NAME,
                  description="Scores purchase receipts and serves the points back by id",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")
    app.state.store = store if store is not None else ReceiptStore()

    app.include_router(receipts_router)

    @app.exception_handler(ValidationError)
    async def on_invalid_receipt(request: Request, exc: ValidationError):
        logger.warning("rejected receipt: %s", exc.reason)
        return JSONResponse(status_code=400, content={"error": exc.reason})

    @app.exception_handler(RequestValidationError)
    async def on_unparsable_body(request: Request, exc: RequestValidationError):
        logger.warning("unparsable receipt body: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": "Failed to parse the request body"})

    @app.exception_handler(ReceiptNotFound)
    async def on_missing_receipt(request: Request, exc: ReceiptNotFound):
        return JSONResponse(status_code=404, content={"error": "Receipt not found"})

    @app.get("/health")
    def health():
        return {"ok": True}

    logger.info("%s starting (env=%s)", settings.APP_NAME, settings.ENV)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
