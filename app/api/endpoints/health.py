from fastapi import APIRouter

from app.services.scheduler import scheduler_service

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    armed = len(scheduler_service.get_scheduler().get_jobs()) if scheduler_service.running else 0
    return {"status": "ok", "scheduler_running": scheduler_service.running, "armed": armed}
