import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app import schemas
from app.crud import skill as skill_crud
from app.database import get_db
from app.ml.categories import normalize_skill_type

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/skills", tags=["Skills"])


# ======================
# POST: Create skill listing
# ======================
@router.post("/", response_model=schemas.SkillListing, status_code=201)
def create_skill(
    listing: schemas.SkillCreate,
    db: Session = Depends(get_db),
):
    created = skill_crud.create_skill_listing(db, listing)
    logger.info(
        "Created %s listing %s for user %s",
        created.skill_type, created.id, created.user_id,
    )
    return created


# ======================
# GET: Skill listings of one user
# ======================
@router.get("/user/{user_id}", response_model=List[schemas.SkillListing])
def get_user_skills(
    user_id: str,
    skill_type: Optional[str] = Query(None, description="offering/seeking (teach/learn accepted)"),
    db: Session = Depends(get_db),
):
    if skill_type is not None and normalize_skill_type(skill_type) is None:
        raise HTTPException(400, "skill_type must be one of: offering, seeking, teach, learn, offer, need")
    return skill_crud.list_user_skills(db, user_id, skill_type=skill_type)


# ======================
# GET: One listing
# ======================
@router.get("/{listing_id}", response_model=schemas.SkillListing)
def get_skill(listing_id: int, db: Session = Depends(get_db)):
    listing = skill_crud.get_skill_listing(db, listing_id)
    if not listing:
        raise HTTPException(404, f"Skill {listing_id} not found")
    return listing


# ======================
# DELETE: Deactivate a listing
# ======================
@router.delete("/{listing_id}")
def deactivate_skill(
    listing_id: int,
    user_id: str = Query(..., description="Owner of the listing"),
    db: Session = Depends(get_db),
):
    if not skill_crud.deactivate_skill_listing(db, listing_id, user_id):
        raise HTTPException(404, "Skill listing not found for this user")
    return {"message": "Skill listing deactivated", "id": listing_id}
