"""Time-off API Routes - Route registration only."""

from fastapi import APIRouter

from workforce.api.v1 import TIME_OFF_PREFIX
from workforce.api.v1.time_off import api

router = APIRouter()
router.include_router(api.router, prefix=TIME_OFF_PREFIX, tags=["Time Off"])
