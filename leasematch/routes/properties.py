"""
Property routes: listing extraction (Apify actor or LLM web search) and listing CRUD.
"""
import logging
from flask import Blueprint, jsonify, request

from leasematch.models.property import Property
from leasematch.services.apify import extract_listing, extract_listing_via_search
from leasematch.services.circuit_breaker import get_breaker
from leasematch.services.store import RecordStore

logger = logging.getLogger('routes.properties')

bp = Blueprint('properties', __name__)


def _requested_url():
    data = request.get_json(silent=True) or {}
    return (data.get('url') or '').strip()


@bp.route('/api/extract-property', methods=['POST'])
def extract_property():
    """Scrape a classifieds listing and store it as a Property."""
    url = _requested_url()
    logger.info("Extract property: %s", url or '<missing>')
    if not url:
        return jsonify({'error': 'Missing url'}), 400

    listing = extract_listing(url, breaker=get_breaker('apify'))
    if listing is None:
        return jsonify({'error': 'No data extracted'}), 404

    prop = RecordStore().insert(Property, listing)
    return jsonify({'success': True, 'property': prop})


@bp.route('/api/extract-property/web-search', methods=['POST'])
def extract_property_web_search():
    """
    LLM web-search fallback. The model's text is relayed as-is in `raw`;
    `property` is filled only when that text is a JSON object. Nothing is stored.
    """
    url = _requested_url()
    if not url:
        return jsonify({'error': 'Missing url'}), 400

    result = extract_listing_via_search(url, breaker=get_breaker('openai'))
    return jsonify({'success': True, **result})


@bp.route('/api/properties')
def list_properties():
    """Newest first."""
    return jsonify(RecordStore().list_records(Property, order_by=Property.created_at.desc()))


@bp.route('/api/properties/<int:property_id>')
def get_property(property_id):
    return jsonify(RecordStore().fetch_one(Property, property_id))


@bp.route('/api/properties/<int:property_id>', methods=['DELETE'])
def delete_property(property_id):
    RecordStore().delete(Property, property_id)
    return jsonify({'success': True})


@bp.route('/api/properties', methods=['DELETE'])
def delete_all_properties():
    deleted = RecordStore().delete_all(Property)
    logger.info("Deleted %d properties", deleted)
    return jsonify({'success': True, 'deleted': deleted})
