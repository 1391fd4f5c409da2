"""
Owner routes: the owner questionnaire (matching preferences).
"""
import logging
from flask import Blueprint, jsonify, request

from leasematch.config import OWNER_ID
from leasematch.models.owner_preferences import OwnerPreferences
from leasematch.services.store import RecordStore

logger = logging.getLogger('routes.owner')

bp = Blueprint('owner', __name__)

LIST_FIELDS = (
    'priorities', 'financial_requirements', 'acceptances',
    'lifestyle_matters', 'dealbreakers',
)
TEXT_FIELDS = (
    'tenant_category', 'student_field', 'student_field_preference',
    'professional_sector', 'professional_sector_preference',
    'min_financial_requirement', 'lease_type', 'min_stay',
    'relationship_management',
)


@bp.route('/api/owner-preferences')
def get_preferences():
    """The owner's preferences, as the scorer sees them."""
    return jsonify(RecordStore().fetch_first(OwnerPreferences))


@bp.route('/api/owner-preferences', methods=['PUT'])
def save_preferences():
    """Create or replace the questionnaire answers for the owner."""
    data = request.get_json(silent=True) or {}

    fields = {'owner_id': data.get('owner_id') or OWNER_ID}
    for name in LIST_FIELDS:
        value = data.get(name, [])
        if not isinstance(value, list):
            return jsonify({'error': f"'{name}' must be a list"}), 400
        fields[name] = value
    for name in TEXT_FIELDS:
        value = data.get(name, '')
        # The questionnaire sends tenant categories as a multi-select
        if isinstance(value, list):
            value = ', '.join(str(v) for v in value if v)
        fields[name] = value or ''

    prefs = RecordStore().upsert(OwnerPreferences, 'owner_id', fields)
    logger.info("Owner preferences saved for %s", prefs['owner_id'])
    return jsonify(prefs)
