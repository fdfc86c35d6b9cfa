from __future__ import annotations

from fastapi import APIRouter

from learning_api.api.endpoints import learning, study

api_router = APIRouter()
api_router.include_router(study.router)
api_router.include_router(learning.router)
