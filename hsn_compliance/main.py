"""
HSN Compliance FastAPI Application Entry Point
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from hsn_compliance import __version__
from hsn_compliance.api.v1 import customs
from hsn_compliance.core.config import settings
from hsn_compliance.middleware.rate_limit import setup_rate_limiting

# Configure logging
logging.basicConfig(level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Customs HSN compliance validation API",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

setup_rate_limiting(app)

# API routes
app.include_router(customs.router, prefix=f"{settings.API_V1_STR}/customs", tags=["customs"])


@app.get("/")
async def root():
    """Root endpoint for health check"""
    return {"message": f"{settings.APP_NAME} is running", "version": __version__}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "hsn-compliance-api"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hsn_compliance.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development
    )
