import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from cvstudio.api.routes.parse import router as parse_router
from cvstudio.api.routes.sessions import router as sessions_router
from cvstudio.core.config import settings

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="CV Studio (Resume Prefill Service)",
    description="Heuristic CV extraction into an editable profile, wording polish, and job-field red flags",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)
app.include_router(sessions_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "cvstudio", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="CV Studio API",
        version="0.1.0",
        description="CV parsing, profile editing and red flag analysis",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
