"""Equipment API Routes - Route registration only."""

from fastapi import APIRouter

from workforce.api.v1 import EQUIPMENT_PREFIX
from workforce.api.v1.equipment import api

router = APIRouter()
router.include_router(api.router, prefix=EQUIPMENT_PREFIX, tags=["Equipment"])
