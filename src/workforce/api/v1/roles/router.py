"""Role API Routes - Route registration only."""

from fastapi import APIRouter

from workforce.api.v1 import ROLES_PREFIX
from workforce.api.v1.roles import api

router = APIRouter()
router.include_router(api.router, prefix=ROLES_PREFIX, tags=["Roles"])
