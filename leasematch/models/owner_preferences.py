"""
OwnerPreferences model: what the property owner wants in a tenant.

One logical row per deployment, keyed by owner_id for questionnaire upserts.
"""
from sqlalchemy import Column, Integer, Text, DateTime, JSON
from sqlalchemy.sql import func

from leasematch.database import Base


class OwnerPreferences(Base):
    __tablename__ = 'owner_preferences'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Text, nullable=False, unique=True)
    priorities = Column(JSON, default=list)
    tenant_category = Column(Text, default='')         # comma-joined categories
    student_field = Column(Text, default='')
    student_field_preference = Column(Text, default='')
    professional_sector = Column(Text, default='')
    professional_sector_preference = Column(Text, default='')
    min_financial_requirement = Column(Text, default='')
    financial_requirements = Column(JSON, default=list)
    lease_type = Column(Text, default='')
    min_stay = Column(Text, default='')
    acceptances = Column(JSON, default=list)
    lifestyle_matters = Column(JSON, default=list)
    relationship_management = Column(Text, default='')
    dealbreakers = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
