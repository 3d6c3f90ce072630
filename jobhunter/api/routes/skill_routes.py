"""
Skill Routes

GET /skills?q= - Search the skill catalogue by name
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from jobhunter.schemas.schemas import SkillResponse
from jobhunter.services.profile_service import SKILL_SEARCH_LIMIT, ProfileRepository, get_profile_repository

router = APIRouter(prefix="/skills", tags=["Skills"])


@router.get("", response_model=List[SkillResponse])
def search_skills(
    q: str = Query("", description="Case-insensitive substring of the skill name"),
    limit: int = Query(SKILL_SEARCH_LIMIT, ge=1, le=100),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.search_skills(q, limit=limit)
