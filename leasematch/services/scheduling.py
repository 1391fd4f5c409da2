"""
Scheduling link: fire the automation webhook that emails a tenant a visit booking link.
"""
import logging
import requests

from leasematch.config import SCHEDULING_WEBHOOK_URL
from leasematch.scoring.errors import UpstreamMisconfigured, UpstreamUnavailable

logger = logging.getLogger('services.scheduling')


def send_scheduling_link(tenant, webhook_url=None):
    """GET the webhook with the tenant's contact details as query params."""
    url = webhook_url or SCHEDULING_WEBHOOK_URL
    if not url:
        raise UpstreamMisconfigured("SCHEDULING_WEBHOOK_URL not set")

    params = {
        'tenant_id': tenant['id'],
        'email': tenant.get('email') or '',
        'first_name': tenant.get('first_name') or '',
        'last_name': tenant.get('last_name') or '',
    }
    try:
        resp = requests.get(url, params=params, timeout=10)
        resp.raise_for_status()
    except requests.RequestException as e:
        detail = e.response.text if e.response is not None else str(e)
        logger.error("Scheduling webhook failed for tenant %s: %s", tenant['id'], detail)
        raise UpstreamUnavailable("Scheduling webhook error: " + str(e), detail=detail)

    logger.info("Scheduling link requested for tenant %s", tenant['id'])
