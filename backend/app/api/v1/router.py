from fastapi import APIRouter
from app.api.v1.endpoints import forum, messages, health

api_router = APIRouter()

# Deep health checks (/health/live, /health/ready)
api_router.include_router(health.router)


@api_router.get("/health", tags=["Health"])
async def health_check():
    """Simple health check endpoint for load balancer"""
    return {"status": "healthy", "service": "mbdf-portal-backend"}


api_router.include_router(forum.router)
api_router.include_router(messages.router)
