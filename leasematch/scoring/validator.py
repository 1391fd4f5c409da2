"""
Range check on the parsed score.

Only the 0–100 integer range is enforced here. Document validity and income
rules are instructions to the model; whatever in-range integer it returns
is accepted as-is.
"""
from leasematch.scoring.errors import InvalidModelOutput

MIN_SCORE = 0
MAX_SCORE = 100


def validate(parsed, raw_response: str) -> int:
    """Return the score to persist, or raise InvalidModelOutput."""
    if parsed.score is None:
        raise InvalidModelOutput("Invalid score from model: no score found", raw_response)
    if not MIN_SCORE <= parsed.score <= MAX_SCORE:
        raise InvalidModelOutput(
            f"Invalid score from model: {parsed.score} is outside {MIN_SCORE}-{MAX_SCORE}",
            raw_response,
        )
    return parsed.score
