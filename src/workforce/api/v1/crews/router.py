"""Crew API Routes - Route registration only."""

from fastapi import APIRouter

from workforce.api.v1 import CREWS_PREFIX
from workforce.api.v1.crews import api

router = APIRouter()
router.include_router(api.router, prefix=CREWS_PREFIX, tags=["Crews"])
