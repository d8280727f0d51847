# apps/api/main.py

import os
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"), override=True)

from logging_config import setup_logging
from app.routers import roi


# ---------- Boot ----------

setup_logging()
logger = logging.getLogger(__name__)

# FastAPI app (create ONCE)
app = FastAPI(title="SkillROI API")

# CORS: allow both localhost & 127.0.0.1 plus explicit APP_BASE_URL / CORS_ORIGINS
_default_webs = ["http://127.0.0.1:3000", "http://localhost:3000"]
_app_base = os.getenv("APP_BASE_URL")
_extra = [o.strip() for o in (os.getenv("CORS_ORIGINS") or "").split(",") if o.strip()]
allow_origins = sorted(set(_default_webs + _extra + ([_app_base] if _app_base else [])))

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(roi.router)


@app.exception_handler(RequestValidationError)
async def log_validation_error(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return await request_validation_exception_handler(request, exc)


# ---------- Probes ----------
@app.get("/")
def root():
    return {"ok": True, "service": "skillroi-api", "cors": allow_origins}

@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
