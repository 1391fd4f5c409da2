"""
TenantProfile model: one row per rental application.

score / pros / cons are the compatibility scoring outputs: written together
by the scoring pipeline and cleared together by the reset endpoint.
"""
import uuid

from sqlalchemy import Column, Integer, Float, Text, Boolean, DateTime, JSON, CheckConstraint
from sqlalchemy.sql import func

from leasematch.database import Base

SCORING_FIELDS = ('score', 'pros', 'cons')


def _new_id():
    return str(uuid.uuid4())


class TenantProfile(Base):
    __tablename__ = 'tenant_profiles'

    id = Column(Text, primary_key=True, default=_new_id)

    # Identity / contact
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=True)
    date_of_birth = Column(Text, nullable=True)

    # Employment + income (three independent income sources)
    profession = Column(Text, nullable=True)
    employment_type = Column(Text, nullable=True)     # CDI / CDD / Freelance / Student ...
    company_name = Column(Text, nullable=True)
    monthly_income = Column(Float, nullable=True)
    income_interview = Column(Text, nullable=True)    # self-reported during interview
    income_documents = Column(Text, nullable=True)    # derived from submitted payslips
    guarantor_type = Column(Text, nullable=True)
    guarantor_income = Column(Float, nullable=True)

    # Lifestyle
    smoking_status = Column(Text, nullable=True)
    pets = Column(JSON, default=list)
    lifestyle_description = Column(Text, nullable=True)
    guest_frequency = Column(Text, nullable=True)
    noise_tolerance = Column(Text, nullable=True)
    languages = Column(JSON, default=list)
    reason_for_moving = Column(Text, nullable=True)

    # Rental history
    previous_rental_document = Column(Boolean, default=False)
    previous_rental_paying = Column(Boolean, default=False)

    # Application workflow
    application_status = Column(Text, default='pending')
    application_date = Column(DateTime(timezone=True), nullable=True)
    interview_date = Column(DateTime(timezone=True), nullable=True)
    interview_notes = Column(Text, nullable=True)
    interview_responses = Column(JSON, nullable=True)
    communication_preference = Column(Text, default='email')
    scheduling_link_sent = Column(Boolean, default=False)
    scheduling_link_sent_date = Column(DateTime(timezone=True), nullable=True)

    # Document validity flags (set by whoever verifies the paperwork)
    tenant_document_id_valid = Column(Boolean, default=False)
    tenant_document_income_valid = Column(Boolean, default=False)
    tenant_document_tax_valid = Column(Boolean, default=False)
    tenant_document_receipt_valid = Column(Boolean, default=False)

    # Scoring outputs
    score = Column(Integer, nullable=True)             # 0-100
    pros = Column(Text, nullable=True)
    cons = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint('score IS NULL OR (score >= 0 AND score <= 100)', name='ck_tenant_score_range'),
    )
