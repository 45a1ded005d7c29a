from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlmodel import Session, text

health = APIRouter(tags=["Health"])


@health.get("/health")
async def health_check(request: Request):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "tedx-ndu",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": request.app.state.settings.get("environment", "development"),
    }


@health.get("/health/detailed")
def detailed_health_check(request: Request):
    """Detailed health check with database connectivity"""
    health_status = {
        "status": "healthy",
        "service": "tedx-ndu",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": request.app.state.settings.get("environment", "development"),
        "checks": {},
    }

    try:
        with Session(request.app.state.engine) as session:
            result = session.exec(text("SELECT 1")).first()
            health_status["checks"]["database"] = "healthy" if result else "unhealthy"
    except Exception as e:
        health_status["checks"]["database"] = f"unhealthy: {str(e)}"
        health_status["status"] = "unhealthy"

    health_status["checks"]["content"] = (
        "healthy" if getattr(request.app.state, "content", None) else "missing"
    )

    if health_status["status"] == "unhealthy":
        return JSONResponse(status_code=503, content=health_status)

    return health_status
