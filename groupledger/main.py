import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from groupledger.api.v1.routes.expense import router as expense_router
from groupledger.api.v1.routes.group import router as group_router
from groupledger.api.v1.routes.system import router as system_router
from groupledger.api.v1.routes.ws import router as ws_router
from groupledger.core.config import settings
from groupledger.core.logging import configure_logging
from groupledger.db.repository import GroupRepository, InMemoryGroupRepository
from groupledger.services.broadcast import GroupBroadcaster

logger = logging.getLogger(__name__)

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))

async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse({"error": f"{field}: {message}" if field else message}, status_code=400)

async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"error": "Internal Server Error"}, status_code=500)

def create_app(
    repository: GroupRepository | None = None,
    broadcaster: GroupBroadcaster | None = None,
) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)
    app.state.repository = repository or InMemoryGroupRepository()
    app.state.broadcaster = broadcaster or GroupBroadcaster()

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.CORS_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    @app.get("/")
    async def root():
        return {"message": f"{settings.APP_NAME} is live"}

    app.include_router(system_router, prefix="/api/v1/system")
    app.include_router(group_router, prefix="/groups")
    app.include_router(expense_router, prefix="/groups")
    app.include_router(ws_router)

    return app

app = create_app()
