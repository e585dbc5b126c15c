"""Permission API Routes - Route registration only."""

from fastapi import APIRouter

from workforce.api.v1 import PERMISSIONS_PREFIX
from workforce.api.v1.permissions import api

router = APIRouter()
router.include_router(api.router, prefix=PERMISSIONS_PREFIX, tags=["Permissions"])
