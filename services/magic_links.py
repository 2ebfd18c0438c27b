"""
Magic link lifecycle: issuing and validating the single-use links that give a
client unauthenticated access to their onboarding questionnaire.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from flask import current_app
from models import MagicLink
from utils.helpers import create_slug, utcnow
from .errors import MagicLinkError, NotFound, InvalidToken, Expired, AlreadyUsed
from .store import get_store

# Links are valid for 7 days, not configurable per link
MAGIC_LINK_TTL = timedelta(days=7)


@dataclass
class MagicLinkResult:
    success: bool
    token: Optional[str] = None
    url: Optional[str] = None
    expires_at: Optional[datetime] = None
    reused: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def failure(cls, error):
        return cls(success=False, error=error.message, error_code=error.code)

    def to_dict(self):
        if not self.success:
            return {'success': False, 'error': self.error, 'error_code': self.error_code}
        return {
            'success': True,
            'token': self.token,
            'url': self.url,
            'expires_at': self.expires_at.isoformat(),
            'existing': self.reused,
        }


@dataclass
class ValidationResult:
    valid: bool
    client: Optional[dict] = None
    magic_link: Optional[dict] = None
    prefilled_data: Optional[dict] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def failure(cls, error):
        return cls(valid=False, error=error.message, error_code=error.code)


def build_onboarding_url(base_url, company_name, token):
    """Public onboarding URL; the slug is cosmetic, only the token matters"""
    return f"{base_url.rstrip('/')}/onboarding/{create_slug(company_name)}/{token}"


class MagicLinkService:
    """Issues and validates onboarding magic links.

    ``store`` and ``base_url`` default to the current Flask app's database
    and ``BASE_URL`` setting; ``clock`` returns the current naive UTC time.
    """

    def __init__(self, store=None, base_url=None, clock=utcnow):
        self._store = store
        self._base_url = base_url
        self.clock = clock

    @property
    def store(self):
        if self._store is None:
            self._store = get_store()
        return self._store

    @property
    def base_url(self):
        if self._base_url is None:
            self._base_url = current_app.config.get('BASE_URL', 'http://localhost:5000')
        return self._base_url

    def generate(self, client_id):
        """Return the client's active link, creating one if none exists"""
        try:
            return self._generate(client_id)
        except MagicLinkError as e:
            print(f"[MagicLink] Could not generate link for client {client_id}: {e.message}")
            return MagicLinkResult.failure(e)

    def _generate(self, client_id):
        client = self.store.get_client(client_id)
        if client is None:
            raise NotFound()

        now = self.clock()

        # Reuse the most recent active link rather than issuing a second one.
        # Check-then-insert is not atomic: concurrent calls may both insert.
        existing = self.store.find_active_link(client.id, now)
        if existing is not None:
            return MagicLinkResult(
                success=True,
                token=existing.token,
                url=build_onboarding_url(self.base_url, client.company_name, existing.token),
                expires_at=existing.expires_at,
                reused=True,
            )

        link = MagicLink(
            token=str(uuid.uuid4()),
            client_id=client.id,
            created_at=now,
            expires_at=now + MAGIC_LINK_TTL,
            used=False,
        )
        self.store.insert_link(link)
        print(f"[MagicLink] Created link for client {client.id}, expires {link.expires_at:%Y-%m-%d %H:%M}")

        return MagicLinkResult(
            success=True,
            token=link.token,
            url=build_onboarding_url(self.base_url, client.company_name, link.token),
            expires_at=link.expires_at,
            reused=False,
        )

    def check_token(self, token):
        """Return the link for ``token`` or raise why it cannot be used"""
        link = self.store.get_link_with_client(token)
        if link is None:
            raise InvalidToken()
        if link.is_expired(self.clock()):
            raise Expired()
        if link.used:
            raise AlreadyUsed()
        return link

    def validate(self, token):
        """Read-only check used on every onboarding page load"""
        try:
            link = self.check_token(token)
        except MagicLinkError as e:
            return ValidationResult.failure(e)

        return ValidationResult(
            valid=True,
            client=link.client.to_dict(),
            magic_link=link.to_dict(),
            prefilled_data=link.prefilled_data,
        )
