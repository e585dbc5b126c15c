"""Attendance API Routes - Route registration only."""

from fastapi import APIRouter

from workforce.api.v1 import ATTENDANCE_PREFIX
from workforce.api.v1.attendance import api

router = APIRouter()
router.include_router(api.router, prefix=ATTENDANCE_PREFIX, tags=["Attendance"])
