"""Trip API Routes - Route registration only."""

from fastapi import APIRouter

from workforce.api.v1 import TRIPS_PREFIX
from workforce.api.v1.trips import api

router = APIRouter()
router.include_router(api.router, prefix=TRIPS_PREFIX, tags=["Trips"])
