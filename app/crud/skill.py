from typing import List, Optional

from sqlalchemy.orm import Session

from app import models, schemas
from app.ml.categories import OFFERING, SEEKING, normalize_key, normalize_skill_type


# ============================
# SKILL LISTINGS
# ============================

def create_skill_listing(db: Session, listing: schemas.SkillCreate) -> models.SkillListing:
    new_listing = models.SkillListing(
        user_id=listing.user_id,
        title=listing.title.strip(),
        description=listing.description,
        category=listing.category,
        subcategory=listing.subcategory,
        proficiency_level=listing.proficiency_level.value,
        skill_type=listing.skill_type.value,
        is_active=True,
    )
    db.add(new_listing)
    db.commit()
    db.refresh(new_listing)
    return new_listing


def get_skill_listing(db: Session, listing_id: int) -> Optional[models.SkillListing]:
    return db.query(models.SkillListing).filter(models.SkillListing.id == listing_id).first()


def list_user_skills(
    db: Session,
    user_id: str,
    skill_type: Optional[str] = None,
    active_only: bool = True,
) -> List[models.SkillListing]:
    query = db.query(models.SkillListing).filter(models.SkillListing.user_id == user_id)
    if skill_type is not None:
        query = query.filter(models.SkillListing.skill_type == normalize_skill_type(skill_type))
    if active_only:
        query = query.filter(models.SkillListing.is_active.is_(True))
    return query.order_by(models.SkillListing.id.asc()).all()


def deactivate_skill_listing(db: Session, listing_id: int, user_id: str) -> bool:
    listing = db.query(models.SkillListing).filter(
        models.SkillListing.id == listing_id,
        models.SkillListing.user_id == user_id,
    ).first()

    if not listing:
        return False

    listing.is_active = False
    db.commit()
    return True


# ============================
# MATCHING INPUTS
# ============================

def get_wanted_skills(db: Session, user_id: str) -> List[models.SkillListing]:
    """Active skills the user is seeking."""
    return list_user_skills(db, user_id, skill_type=SEEKING)


def _offered_pool_query(db: Session, exclude_user_id: Optional[str], category: Optional[str]):
    query = db.query(models.SkillListing).filter(
        models.SkillListing.skill_type == OFFERING,
        models.SkillListing.is_active.is_(True),
    )
    if exclude_user_id is not None:
        query = query.filter(models.SkillListing.user_id != exclude_user_id)
    if category is not None:
        query = query.filter(models.SkillListing.category == normalize_key(category))
    return query


def get_offered_pool(
    db: Session,
    exclude_user_id: Optional[str] = None,
    category: Optional[str] = None,
) -> List[models.SkillListing]:
    """Active offered skills, optionally without one user's own listings or outside one category."""
    return (
        _offered_pool_query(db, exclude_user_id, category)
        .order_by(models.SkillListing.id.asc())
        .all()
    )


def count_offered_pool(
    db: Session,
    exclude_user_id: Optional[str] = None,
    category: Optional[str] = None,
) -> int:
    return _offered_pool_query(db, exclude_user_id, category).count()


def _active_skills_query(db: Session, exclude_id: Optional[int]):
    query = db.query(models.SkillListing).filter(models.SkillListing.is_active.is_(True))
    if exclude_id is not None:
        query = query.filter(models.SkillListing.id != exclude_id)
    return query


def get_active_skills(db: Session, exclude_id: Optional[int] = None) -> List[models.SkillListing]:
    return _active_skills_query(db, exclude_id).order_by(models.SkillListing.id.asc()).all()


def count_active_skills(db: Session, exclude_id: Optional[int] = None) -> int:
    return _active_skills_query(db, exclude_id).count()
