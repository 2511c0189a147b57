"""
API routes for the calculators.
"""

from fastapi import APIRouter

from fincalc.api import calculations, preferences

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
