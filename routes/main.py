from datetime import datetime, timezone
from fastapi import APIRouter

main_router = APIRouter(prefix="/api")


@main_router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
