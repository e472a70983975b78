"""Goal Projection Engine - FastAPI Application Entry Point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.projection_engine.api import router
from src.projection_engine.config import settings
from src.projection_engine.exceptions import InvalidInputError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Goal Projection Engine",
    description="Savings, goal and debt payoff calculators for apps and AI agents",
    version="0.1.0",
)

# CORS middleware for cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    """Report out-of-domain calculator inputs as validation errors."""
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "goal-projection-engine"}


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": "Goal Projection Engine",
        "version": "0.1.0",
        "description": "Financial projection and amortization calculators",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
