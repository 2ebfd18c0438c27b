"""
Onboarding submission: applies a client's questionnaire to their record and
consumes the magic link that granted access.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from pydantic import ValidationError
from schemas import OnboardingForm
from utils.helpers import utcnow
from .errors import MagicLinkError, PayloadError, PersistenceError
from .magic_links import MagicLinkService

SUCCESS_MESSAGE = 'Onboarding completed successfully!'

# Written by their own rules below instead of the generic copy
_CONDITIONAL_FIELDS = ('address', 'service_area', 'competitors')


@dataclass
class SubmissionResult:
    success: bool
    message: Optional[str] = None
    finalized: bool = False
    client_id: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    field_errors: List[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error):
        return cls(success=False, error=error.message, error_code=error.code,
                   field_errors=getattr(error, 'field_errors', []))

    def to_dict(self):
        if not self.success:
            return {'success': False, 'error': self.error, 'error_code': self.error_code,
                    'field_errors': self.field_errors}
        return {'success': True, 'message': self.message, 'finalized': self.finalized}


def parse_onboarding_payload(data):
    """Validate raw submitted data, raising PayloadError with field messages"""
    try:
        return OnboardingForm.model_validate(data or {})
    except ValidationError as e:
        field_errors = []
        for err in e.errors():
            location = '.'.join(str(part) for part in err['loc'])
            field_errors.append(f"{location}: {err['msg']}" if location else err['msg'])
        raise PayloadError(field_errors=field_errors) from e


def build_client_update(form, now):
    """Columns to write for a validated submission.

    Only fields present in the submission are written. Address and service
    area follow the location mode: the non-applicable one is always cleared.
    """
    submitted = form.model_dump(mode='json')
    fields = {}

    for name in form.model_fields_set:
        if name in _CONDITIONAL_FIELDS:
            continue
        value = submitted[name]
        fields[name] = None if value == '' else value

    if form.location_type == 'storefront':
        fields['address'] = form.address or None
        fields['service_area'] = None
    else:
        fields['address'] = None
        fields['service_area'] = form.service_area or None

    if form.competitors:
        fields['competitors'] = [
            {'name': competitor.name, 'gbp_url': competitor.url or None}
            for competitor in form.competitors
        ]

    fields['onboarding_status'] = 'completed'
    fields['updated_at'] = now
    return fields


class OnboardingService:
    """Consumes a magic link by applying the client's onboarding answers"""

    def __init__(self, store=None, clock=utcnow, links=None):
        self.links = links or MagicLinkService(store=store, clock=clock)
        self.clock = clock

    def submit(self, token, data):
        try:
            link = self.links.check_token(token)
            form = parse_onboarding_payload(data)
            client_id = link.client_id
            now = self.clock()
            self.links.store.update_client(client_id, build_client_update(form, now))
        except MagicLinkError as e:
            print(f"[Onboarding] Submission rejected ({e.code}): {e.message}")
            return SubmissionResult.failure(e)

        print(f"[Onboarding] Client {client_id} completed onboarding")

        # The profile is saved at this point; a failed flag write leaves the
        # link reusable but does not fail the submission.
        finalized = True
        try:
            self.links.store.mark_link_used(token, now)
        except PersistenceError as e:
            print(f"[Onboarding] Warning: could not mark link as used for client {client_id}: {e.message}")
            finalized = False

        return SubmissionResult(success=True, message=SUCCESS_MESSAGE,
                                finalized=finalized, client_id=client_id)
