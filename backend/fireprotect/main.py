import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fireprotect.config import CORS_ORIGINS
from fireprotect.errors import FireProtectError
from fireprotect.logging_config import setup_logging
from fireprotect.routes.alerts import router as alerts_router
from fireprotect.routes.analytics import router as analytics_router
from fireprotect.routes.changes import router as changes_router
from fireprotect.routes.functions import router as functions_router
from fireprotect.routes.locations import router as locations_router
from fireprotect.routes.profile import router as profile_router

# Initialize logging before anything else
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="FireProtect", version="0.1.0")
logger.info("FastAPI app created")

# Include routers
app.include_router(functions_router)
app.include_router(locations_router)
app.include_router(alerts_router)
app.include_router(analytics_router)
app.include_router(profile_router)
app.include_router(changes_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


@app.exception_handler(FireProtectError)
async def fireprotect_error_handler(request: Request, exc: FireProtectError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})


@app.on_event("startup")
async def startup_event():
    logger.info("FireProtect backend starting up")
    logger.info("API docs available at http://localhost:8000/docs")


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}
