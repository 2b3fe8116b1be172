from sqlalchemy import Boolean, Column, Integer, String, Text, TIMESTAMP, func
from app.database import Base

# app/models/skill.py
class SkillListing(Base):
    __tablename__ = "skill_listings"

    id = Column(Integer, primary_key=True, index=True)
    # Owner lives in the account service; no FK here
    user_id = Column(String(64), index=True, nullable=False)
    title = Column(String(100), nullable=False, index=True)
    description = Column(Text)
    category = Column(String(50), nullable=False, index=True)
    subcategory = Column(String(50))
    proficiency_level = Column(String(20), nullable=False)  # beginner / intermediate / advanced / expert
    skill_type = Column(String(20), nullable=False)  # 'offering' or 'seeking'
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())
