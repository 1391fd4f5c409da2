"""
Failure kinds for the scoring pipeline and its external collaborators.

Every error carries a stable `kind`, the HTTP status the API answers with,
and a `detail` string holding whatever diagnostic text was available
(upstream error body, raw model output, DB message).
"""


class ScoringError(Exception):
    kind = 'scoring_error'
    http_status = 500

    def __init__(self, message, detail=None):
        self.message = message
        self.detail = detail
        super().__init__(message)

    def to_dict(self):
        body = {'error': self.message, 'kind': self.kind}
        if self.detail:
            body['detail'] = self.detail
        return body


class MissingInput(ScoringError):
    """Tenant or owner-preference record not found."""
    kind = 'missing_input'
    http_status = 404


class NotFound(MissingInput):
    """Raised by store reads when an identifier does not resolve."""

    def __init__(self, collection, record_id=None):
        self.collection = collection
        self.record_id = record_id
        if record_id is None:
            message = f"No record in '{collection}'"
        else:
            message = f"Record '{record_id}' not found in '{collection}'"
        super().__init__(message)


class UpstreamMisconfigured(ScoringError):
    """A credential or endpoint needed for an outbound call is not configured."""
    kind = 'upstream_misconfigured'
    http_status = 500


class UpstreamUnavailable(ScoringError):
    """Network or HTTP failure talking to an external service."""
    kind = 'upstream_unavailable'
    http_status = 502


class InvalidModelOutput(ScoringError):
    """Model answered, but the score is missing or out of range."""
    kind = 'invalid_model_output'
    http_status = 502

    def __init__(self, message, raw_response=''):
        self.raw_response = raw_response
        super().__init__(message, detail=raw_response)


class StoreError(ScoringError):
    """A write to the record store could not be applied."""
    kind = 'store_error'
    http_status = 500
