"""Health Routes — process liveness and database readiness.

Invariants:
    - GET /health answers 200 whenever the process can serve a request
    - GET /health/ready answers 503 until the lifespan has attached a session
      manager to app.state and that manager can run a query
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def liveness():
    return {"status": "ok"}


@router.get("/ready")
async def readiness(request: Request):
    """Report whether the database behind app.state.db_manager answers."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "down"},
        )
    return {"status": "ok", "database": "up"}
