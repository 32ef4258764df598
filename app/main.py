import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core import config
from app.core.errors import AppError
from app.core.logging_config import setup_logging

# ✅ Import All API Routes
from app.api.routes import (
    auth,
    interviewers,
    popular_interviews,
    behavioral_interviews,
    questions,
    user,
    resume,
    call,
    dashboard,
    health,
)

logger = logging.getLogger(__name__)


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Interview Trainer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.on_event("startup")
def configure_logging():
    setup_logging(log_level=config.LOG_LEVEL, log_dir=config.LOG_DIR)
    logger.info("Interview Trainer API starting")


# ============================================
# ✅ ERROR RESPONSES
# ============================================

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message, "code": exc.code},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error", "message": str(exc)},
    )


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(auth.router)
app.include_router(interviewers.router)
app.include_router(popular_interviews.router)
app.include_router(behavioral_interviews.router)
app.include_router(questions.router)
app.include_router(user.router)
app.include_router(resume.router)
app.include_router(call.router)
app.include_router(dashboard.router)
app.include_router(health.router)


@app.get("/")
def root():
    return {"status": "Interview Trainer API running"}
