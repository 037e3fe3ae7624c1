import uvicorn as uvicorn
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
import logging

from src.config.settings import settings
from src.crud.earlyAccessStore import EarlyAccessStore
from src.routes import subscribeRoute

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# Initialize FastAPI app with lifespan context
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fails fast here if MONGO_URI / MONGO_DATABASE are not set
    store = EarlyAccessStore.from_settings(settings)
    await store.connect()
    app.state.store = store

    yield

    # Shutdown logic
    store.close()


app = FastAPI(
    lifespan=lifespan,
    docs_url=None if settings.ENVIRONMENT.lower() == "production" else "/docs",
    redoc_url=None if settings.ENVIRONMENT.lower() == "production" else "/redoc"
)


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler, every error leaves as {"error": <message>}"""
    status_code = 500
    message = "Internal server error"

    # Handle HTTP exceptions (404, 405, etc.)
    if isinstance(exc, StarletteHTTPException):
        status_code = exc.status_code
        message = str(exc.detail)

    # Handle validation errors
    elif isinstance(exc, RequestValidationError):
        status_code = 422
        message = "Validation error"

    # Log unexpected errors
    if status_code == 500:
        logger.error(f"Unexpected error on {request.url.path}: {str(exc)}", exc_info=True)

    return JSONResponse(
        status_code=status_code,
        content={"error": message}
    )


# Register the handler for all exceptions
app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(StarletteHTTPException, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(subscribeRoute.router, tags=['Early Access'], prefix='/api')


@app.get("/api/healthchecker")
def root():
    return {"message": "Welcome to Early Access"}


if __name__ == "__main__":
    uvicorn.run("src.main:app", host="0.0.0.0", port=5001, reload=True, log_level="info")
