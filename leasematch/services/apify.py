"""
Classifieds listing extraction through an Apify actor.

The actor is a black box: we send it the listing URL, wait for the run to
finish, and map the first dataset item onto our Property columns. When the
actor is not an option, a web-search model is asked to describe the listing.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from apify_client import ApifyClient

from leasematch.config import APIFY_API_TOKEN, APIFY_LISTING_ACTOR_ID
from leasematch.scoring.errors import UpstreamMisconfigured, UpstreamUnavailable
from leasematch.services.circuit_breaker import CircuitOpenError

logger = logging.getLogger('services.apify')

# Fields copied verbatim from the actor's item (our column name == their key)
_PASSTHROUGH_FIELDS = [
    'list_id', 'status', 'category_id', 'category_name', 'subject', 'body',
    'brand', 'ad_type', 'url', 'price', 'price_cents', 'owner', 'options',
    'has_phone', 'attributes_listing', 'is_boosted', 'counters', 'attributes',
    'country_id', 'region_id', 'region_name', 'department_id', 'city_label',
    'city', 'zipcode', 'lat', 'lng', 'source', 'provider', 'is_shape',
    'images', 'nb_images', 'thumb_image', 'search_url', 'transport',
    'point_of_interests',
]

_DATE_FIELDS = ['first_publication_date', 'expiration_date', 'index_date']

# Actor returns these as numbers; our columns are text
_TEXT_ID_FIELDS = ['list_id', 'category_id', 'country_id', 'region_id', 'department_id', 'zipcode']


def build_actor_input(url: str) -> Dict[str, Any]:
    return {
        'products_url': url,
        'feature': 'product_details',
        'phone_min_delay': 10,
        'list_cookies': [],
        'proxyConfiguration': {
            'useApifyProxy': True,
            'apifyProxyGroups': ['RESIDENTIAL'],
            'apifyProxyCountry': 'FR',
        },
    }


def _parse_date(value) -> Optional[datetime]:
    """Actor dates come as 'YYYY-MM-DD HH:MM:SS' strings or epoch millis."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            logger.debug("Unparseable listing date %r", value)
    return None


def map_listing(item: Dict[str, Any]) -> Dict[str, Any]:
    """Actor dataset item → Property column values."""
    listing = {name: item.get(name) for name in _PASSTHROUGH_FIELDS}
    for name in _TEXT_ID_FIELDS:
        if listing[name] is not None:
            listing[name] = str(listing[name])
    for name in _DATE_FIELDS:
        listing[name] = _parse_date(item.get(name))
    listing['similar_data'] = item.get('similar')
    return listing


def extract_listing(url: str, token: str = None, client=None, breaker=None) -> Optional[Dict[str, Any]]:
    """
    Run the listing actor on `url` and return the mapped first item,
    or None when the actor produced no items.
    """
    token = token or APIFY_API_TOKEN
    if not token and client is None:
        raise UpstreamMisconfigured("APIFY_API_TOKEN not set")

    apify = client or ApifyClient(token)
    run_input = build_actor_input(url)
    logger.info("Running listing actor for %s", url)

    def _run():
        run = apify.actor(APIFY_LISTING_ACTOR_ID).call(run_input=run_input, timeout_secs=300)
        if run is None:
            raise UpstreamUnavailable("Apify actor run did not return")
        return list(apify.dataset(run['defaultDatasetId']).iterate_items())

    try:
        items = breaker.call(_run) if breaker is not None else _run()
    except (UpstreamUnavailable, UpstreamMisconfigured):
        raise
    except CircuitOpenError as e:
        raise UpstreamUnavailable("Apify error: service temporarily disabled", detail=str(e))
    except Exception as e:
        logger.error("Listing actor failed for %s: %s", url, e)
        raise UpstreamUnavailable("Apify error: " + str(e), detail=str(e))

    logger.info("Listing actor returned %d items for %s", len(items), url)
    if not items:
        return None
    return map_listing(items[0])


def extract_listing_via_search(url: str, settings=None, client=None, breaker=None) -> Dict[str, Any]:
    """
    LLM web-search fallback for when the actor is not an option.

    Returns {'raw': <model text>, 'property': <dict or None>}; `property` is
    set only when the model answered with a JSON object.
    """
    from leasematch.config import ScoringSettings, OPENAI_LISTING_SEARCH_MODEL
    from leasematch.services.openai_client import ListingSearchClient

    if client is None:
        from leasematch.extensions import openai_client
        client = openai_client
    search = ListingSearchClient(
        settings or ScoringSettings.from_env(),
        model=OPENAI_LISTING_SEARCH_MODEL,
        client=client,
        breaker=breaker,
    )
    raw = search.search(url)

    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.info("Web-search answer for %s is not JSON, relaying raw text", url)
        parsed = None
    if not isinstance(parsed, dict):
        parsed = None
    return {'raw': raw, 'property': parsed}
