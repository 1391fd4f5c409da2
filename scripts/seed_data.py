#!/usr/bin/env python3
"""
Seed demo data for trying the scorer locally.

Creates the owner's preference sheet plus five unscored applications:
  1. Marie Dubois    (CDI engineer, parental guarantor)
  2. Thomas Martin   (CDI marketing, has a cat)
  3. Sophie Chen     (student, parental guarantor)
  4. Lucas Petit     (freelance designer, occasional smoker)
  5. Emma Rodriguez  (civil servant)

Usage:
    python scripts/seed_data.py          # seed everything
    python scripts/seed_data.py --clear  # wipe tenants + preferences first

Requires: DATABASE_URL set (or defaults to sqlite:///local.db).
"""
import sys
import os
import argparse
from datetime import datetime, timezone, timedelta

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from leasematch import create_app
from leasematch.config import OWNER_ID
from leasematch.database import engine, Base
from leasematch.models.owner_preferences import OwnerPreferences
from leasematch.models.tenant import TenantProfile
from leasematch.services.store import RecordStore


# ── Demo owner ───────────────────────────────────────────────────────────────

OWNER = {
    'owner_id': OWNER_ID,
    'priorities': ['Financial stability', 'Quiet lifestyle', 'Long-term stay'],
    'tenant_category': 'Young professional, Student',
    'student_field': 'Business, Engineering',
    'student_field_preference': 'Nice to have',
    'professional_sector': 'Tech, Public sector',
    'professional_sector_preference': 'Nice to have',
    'min_financial_requirement': '3x rent',
    'financial_requirements': ['Guarantor', 'Payslips'],
    'lease_type': 'Unfurnished',
    'min_stay': '12 months',
    'acceptances': ['Cats'],
    'lifestyle_matters': ['No parties', 'Quiet after 22h'],
    'relationship_management': 'Email, monthly check-in',
    'dealbreakers': ['Smoking indoors', 'Dogs'],
}


# ── Demo tenants ─────────────────────────────────────────────────────────────

TENANTS = [
    {
        'first_name': 'Marie', 'last_name': 'Dubois', 'email': 'marie.dubois@email.com',
        'phone': '+33 6 12 34 56 78', 'date_of_birth': '1999-03-15',
        'profession': 'Software Engineer', 'employment_type': 'CDI', 'company_name': 'Tech Corp',
        'monthly_income': 4200, 'guarantor_type': 'Parents', 'guarantor_income': 8500,
        'smoking_status': 'Non-smoker', 'pets': [],
        'lifestyle_description': 'Quiet, enjoys reading and cooking. Works regular hours.',
        'guest_frequency': 'Occasionally', 'noise_tolerance': 'Quiet',
        'reason_for_moving': 'Job relocation', 'languages': ['French', 'English', 'Spanish'],
        'application_status': 'reviewing',
        'tenant_document_id_valid': True, 'tenant_document_income_valid': True,
        'tenant_document_tax_valid': True, 'tenant_document_receipt_valid': True,
    },
    {
        'first_name': 'Thomas', 'last_name': 'Martin', 'email': 'thomas.martin@email.com',
        'phone': '+33 6 23 45 67 89', 'date_of_birth': '1995-07-22',
        'profession': 'Marketing Manager', 'employment_type': 'CDI', 'company_name': 'Creative Agency',
        'monthly_income': 3800, 'guarantor_type': 'Bank', 'guarantor_income': None,
        'smoking_status': 'Non-smoker', 'pets': ['Cat'],
        'lifestyle_description': 'Social and active, enjoys photography and travel.',
        'guest_frequency': 'Frequently', 'noise_tolerance': 'Moderate',
        'reason_for_moving': 'Apartment too small', 'languages': ['French', 'English'],
        'application_status': 'approved',
        'tenant_document_id_valid': True, 'tenant_document_income_valid': True,
        'tenant_document_tax_valid': False, 'tenant_document_receipt_valid': True,
    },
    {
        'first_name': 'Sophie', 'last_name': 'Chen', 'email': 'sophie.chen@email.com',
        'phone': '+33 6 34 56 78 90', 'date_of_birth': '2001-11-08',
        'profession': "Master's Student", 'employment_type': 'Student', 'company_name': 'Business School',
        'monthly_income': 2100, 'guarantor_type': 'Parents', 'guarantor_income': 6500,
        'smoking_status': 'Non-smoker', 'pets': [],
        'lifestyle_description': 'Studious and organized, enjoys piano and art.',
        'guest_frequency': 'Rarely', 'noise_tolerance': 'Quiet',
        'reason_for_moving': 'Student housing expired', 'languages': ['Chinese', 'French', 'English'],
        'application_status': 'pending',
    },
    {
        'first_name': 'Lucas', 'last_name': 'Petit', 'email': 'lucas.petit@email.com',
        'phone': '+33 6 45 67 89 01', 'date_of_birth': '1997-05-12',
        'profession': 'Graphic Designer', 'employment_type': 'Freelance', 'company_name': 'Freelance',
        'monthly_income': 2800, 'guarantor_type': 'Bank', 'guarantor_income': None,
        'smoking_status': 'Occasional', 'pets': [],
        'lifestyle_description': 'Creative and flexible, works from home often.',
        'guest_frequency': 'Occasionally', 'noise_tolerance': 'Flexible',
        'reason_for_moving': 'Seeking better workspace', 'languages': ['French', 'English', 'Italian'],
        'application_status': 'pending',
    },
    {
        'first_name': 'Emma', 'last_name': 'Rodriguez', 'email': 'emma.rodriguez@email.com',
        'phone': '+33 6 56 78 90 12', 'date_of_birth': '1993-09-03',
        'profession': 'Civil Servant', 'employment_type': 'CDI', 'company_name': 'Ministry of Education',
        'monthly_income': 3600, 'guarantor_type': 'Employment', 'guarantor_income': None,
        'smoking_status': 'Non-smoker', 'pets': [],
        'lifestyle_description': 'Stable and quiet, enjoys gardening and hiking.',
        'guest_frequency': 'Rarely', 'noise_tolerance': 'Quiet',
        'reason_for_moving': 'Moving closer to work', 'languages': ['Spanish', 'French', 'English'],
        'application_status': 'reviewing',
        'tenant_document_id_valid': True, 'tenant_document_income_valid': True,
        'tenant_document_tax_valid': True, 'tenant_document_receipt_valid': False,
    },
]


def seed_owner(store):
    row = store.upsert(OwnerPreferences, 'owner_id', dict(OWNER))
    print(f'  Owner preferences: {row["owner_id"]}')


def seed_tenants(store):
    now = datetime.now(timezone.utc)
    for offset, tenant in enumerate(TENANTS):
        fields = dict(tenant)
        fields.setdefault('previous_rental_document', True)
        fields.setdefault('previous_rental_paying', True)
        fields['application_date'] = now - timedelta(days=len(TENANTS) - offset)
        row = store.insert(TenantProfile, fields)
        print(f'  Tenant: {row["first_name"]} {row["last_name"]} ({row["id"]})')


def clear_seeded_data(store):
    """Remove every tenant application and owner preference row."""
    tenants = store.delete_all(TenantProfile)
    owners = store.delete_all(OwnerPreferences)
    print(f'Cleared {tenants} tenants, {owners} owner preference rows.')


def main():
    parser = argparse.ArgumentParser(description='Seed demo tenants and owner preferences')
    parser.add_argument('--clear', action='store_true', help='Clear existing data before (or instead of) seeding')
    parser.add_argument('--clear-only', action='store_true', help='Only clear, do not re-seed')
    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        # Ensure tables exist (for SQLite local dev)
        Base.metadata.create_all(engine)

        store = RecordStore()
        if args.clear or args.clear_only:
            clear_seeded_data(store)
            if args.clear_only:
                return

        print('Seeding demo data...')
        seed_owner(store)
        seed_tenants(store)
        print('\nDone! POST /api/scorer/<tenant_id> to score an application.')


if __name__ == '__main__':
    main()
