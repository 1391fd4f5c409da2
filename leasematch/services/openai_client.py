"""
OpenAI helpers: compatibility scoring completion and listing web-search fallback.

No retries anywhere: an OpenAI failure is terminal for that invocation and
surfaces as UpstreamUnavailable with the upstream's raw error text.
"""
import logging

import openai

from leasematch.scoring.errors import UpstreamMisconfigured, UpstreamUnavailable
from leasematch.scoring.prompt import SYSTEM_ROLE
from leasematch.services.circuit_breaker import CircuitOpenError

logger = logging.getLogger('services.openai')


def _upstream_detail(error):
    """Raw response body for HTTP status errors, the message otherwise."""
    if isinstance(error, openai.APIStatusError):
        return error.response.text or str(error)
    return str(error)


class ChatClient:
    """Thin wrapper over client.chat.completions.create with breaker + error mapping."""

    def __init__(self, settings, client=None, breaker=None):
        self.settings = settings
        self._client = client
        self.breaker = breaker

    @property
    def client(self):
        if self._client is None:
            self._client = openai.OpenAI(api_key=self.settings.api_key)
        return self._client

    def chat(self, **kwargs) -> str:
        """Run one chat completion and return the first choice's text."""
        # Checked before any client is built or request sent
        if not self.settings.api_key:
            raise UpstreamMisconfigured("Missing OpenAI API key")

        create = self.client.chat.completions.create
        try:
            if self.breaker is None:
                response = create(**kwargs)
            else:
                response = self.breaker.call(create, **kwargs)
        except CircuitOpenError as e:
            logger.warning("OpenAI circuit open, call skipped: %s", e)
            raise UpstreamUnavailable("OpenAI error: service temporarily disabled", detail=str(e))
        except openai.OpenAIError as e:
            detail = _upstream_detail(e)
            logger.error("OpenAI chat completion failed: %s", detail)
            raise UpstreamUnavailable("OpenAI error: " + detail, detail=detail)

        if not response.choices:
            return ''
        return (response.choices[0].message.content or '').strip()


class ScoringClient(ChatClient):
    """Prompt in, free-form scoring text out."""

    def complete(self, prompt: str) -> str:
        content = self.chat(
            model=self.settings.model,
            messages=[
                {"role": "system", "content": SYSTEM_ROLE},
                {"role": "user", "content": prompt},
            ],
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
        )
        logger.debug("Raw model response: %s", content)
        return content


LISTING_SEARCH_PROMPT = """Find the rental listing published at this URL and describe it.

URL: {url}

Respond ONLY with a JSON object using these keys when known:
subject, body, price, city, zipcode, region_name, surface_m2, rooms,
furnished, energy_rating, images, owner_name, url."""


class ListingSearchClient(ChatClient):
    """Web-search model used when the classifieds scraper is not an option."""

    def __init__(self, settings, model, client=None, breaker=None):
        super().__init__(settings, client=client, breaker=breaker)
        self.model = model

    def search(self, url: str) -> str:
        """Returns the model's text untouched; callers decide if it is usable JSON."""
        return self.chat(
            model=self.model,
            web_search_options={},
            messages=[{"role": "user", "content": LISTING_SEARCH_PROMPT.format(url=url)}],
        )
