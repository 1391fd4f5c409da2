"""
Scorer routes: compatibility scoring trigger and scoring reset.

Called cross-origin by the dashboard front-end, hence the CORS headers.
"""
import logging
from flask import Blueprint, jsonify, request

from leasematch.config import CORS_ALLOWED_ORIGIN
from leasematch.scoring.pipeline import build_pipeline

logger = logging.getLogger('routes.scorer')

bp = Blueprint('scorer', __name__)


@bp.after_request
def add_cors_headers(response):
    response.headers['Access-Control-Allow-Origin'] = CORS_ALLOWED_ORIGIN
    response.headers['Access-Control-Allow-Methods'] = 'POST, OPTIONS'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Authorization'
    return response


@bp.route('/api/scorer/<tenant_id>', methods=['POST', 'OPTIONS'])
def score_tenant(tenant_id):
    """Run the scoring pipeline for one tenant."""
    if request.method == 'OPTIONS':
        return '', 204

    logger.info("POST scorer for tenant %s", tenant_id)
    outcome = build_pipeline().run(tenant_id)
    if not outcome.ok:
        return jsonify(outcome.to_dict()), outcome.error.http_status
    return jsonify(outcome.to_dict())


@bp.route('/api/tenants/<tenant_id>/remove-pros-cons-score', methods=['POST'])
def remove_scoring(tenant_id):
    """Clear score, pros and cons together."""
    build_pipeline().reset(tenant_id)
    return jsonify({'success': True})
