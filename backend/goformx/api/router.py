"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from goformx.api.health import router as health_router
from goformx.api.forms import router as forms_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Form and submission validation
api_router.include_router(forms_router, tags=["Forms"])
