"""
Activity catalog routes.
"""

from typing import List

from fastapi import APIRouter

from fittrack.shared.constants import ACTIVITIES
from fittrack.schemas.workout import ActivityInfoResponse

router = APIRouter()


@router.get("", response_model=List[ActivityInfoResponse])
async def list_activities():
    """Recordable activity types in display order."""
    return [ActivityInfoResponse.from_info(info) for info in ACTIVITIES]
