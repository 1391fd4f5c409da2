"""
Prompt construction for tenant ↔ owner compatibility scoring.

The prompt is a pure function of the two records and the scoring settings:
identical inputs always render byte-identical text.
"""
import json
from datetime import date, datetime
from typing import Any, Dict, Iterable, Protocol

from leasematch.models.tenant import SCORING_FIELDS

SYSTEM_ROLE = "You are a compatibility scoring agent for rental housing."


class RecordSerializer(Protocol):
    """Turns a stored record (plain dict) into text the model can read."""

    def serialize(self, record: Dict[str, Any], exclude: Iterable[str] = ()) -> str:
        ...


class FieldLineSerializer:
    """`field: value`, one field per line, in the record's own key order."""

    def serialize(self, record: Dict[str, Any], exclude: Iterable[str] = ()) -> str:
        skip = set(exclude)
        return "\n".join(
            f"{key}: {self._render(value)}"
            for key, value in record.items()
            if key not in skip
        )

    def _render(self, value):
        if value is None:
            return 'null'
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        if isinstance(value, (list, tuple)):
            if not value:
                return '[]'
            return ', '.join(self._render(v) for v in value)
        if isinstance(value, dict):
            return json.dumps(value, sort_keys=True, ensure_ascii=False, default=str)
        # keep one field per line
        return str(value).replace('\r\n', '\n').replace('\n', '\\n')


class JsonSerializer:
    """Pretty-printed JSON block with sorted keys."""

    def serialize(self, record: Dict[str, Any], exclude: Iterable[str] = ()) -> str:
        skip = set(exclude)
        clean = {k: v for k, v in record.items() if k not in skip}
        return json.dumps(clean, indent=2, sort_keys=True, ensure_ascii=False, default=str)


class PromptBuilder:
    """
    Renders the scoring prompt:

      1. role statement
      2. tenant record
      3. owner-preference record
      4. scoring instructions (dealbreakers, score range, bullet counts,
         document-validity override, income heuristic)
      5. required output format

    The tenant's previous score/pros/cons are never shown to the model, so a
    re-score sees exactly the same input as the first run.
    """

    def __init__(self, settings, serializer: RecordSerializer = None):
        self.settings = settings
        self.serializer = serializer or FieldLineSerializer()

    def build(self, tenant: Dict[str, Any], owner: Dict[str, Any]) -> str:
        s = self.settings
        n = s.bullets
        lines = [
            SYSTEM_ROLE,
            "Here is the tenant profile:",
            self.serializer.serialize(tenant, exclude=SCORING_FIELDS),
            "",
            "Here are the owner's preferences:",
            self.serializer.serialize(owner),
            "",
            "Instructions:",
            "- Heavily penalize the score if the tenant does not match the owner's expectations "
            "or matches any of the owner's dealbreakers (field dealbreakers in the owner's preferences).",
            "- Produce a compatibility score out of 100 as a whole number between 0 and 100.",
            f"- Give exactly {n} positive points (Pros) and exactly {n} negative points (Cons) "
            "about the compatibility, as bullet points.",
            "- Important: if tenant_document_id_valid is false or tenant_document_income_valid is false, "
            "the score MUST be 0 even if everything else is good. This rule takes priority over all other rules.",
            "- The previous rental document (previous_rental_document) does not matter for the score, "
            "it is for information only.",
            "- Important: a very high income must give a very high score. If the income "
            "(monthly_income, income_interview or income_documents) is above "
            f"{s.income_high}, the score should be at least {s.income_high_score}; "
            f"if it is {s.income_top} or more, the score should be close to 100.",
            "Expected answer format (in English, with no other text):",
            "Score: <integer between 0 and 100>",
            "Pros:",
            *["- ..."] * n,
            "Cons:",
            *["- ..."] * n,
        ]
        return "\n".join(lines)
