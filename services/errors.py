"""
Error taxonomy for the magic link lifecycle.

Services raise these internally and convert them into result objects at
their public boundary; views map ``code`` to a translated message.
"""


class MagicLinkError(Exception):
    """Base class for magic link and onboarding failures"""
    code = 'error'
    default_message = 'Unexpected error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ConfigurationError(MagicLinkError):
    code = 'configuration'
    default_message = 'Server configuration error: Missing database credentials'


class NotFound(MagicLinkError):
    code = 'not_found'
    default_message = 'Client not found'


class InvalidToken(NotFound):
    code = 'invalid'
    default_message = 'Invalid or expired link'


class Expired(MagicLinkError):
    code = 'expired'
    default_message = 'This link has expired'


class AlreadyUsed(MagicLinkError):
    code = 'already_used'
    default_message = 'This link has already been used'


class PersistenceError(MagicLinkError):
    code = 'persistence'
    default_message = 'Failed to save changes'


class PayloadError(MagicLinkError):
    """Onboarding payload rejected by the schema"""
    code = 'invalid_payload'
    default_message = 'Some fields are missing or invalid'

    def __init__(self, message=None, field_errors=None):
        super().__init__(message)
        self.field_errors = field_errors or []
