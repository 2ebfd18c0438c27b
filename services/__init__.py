from .errors import (MagicLinkError, ConfigurationError, NotFound, InvalidToken, Expired,
                     AlreadyUsed, PersistenceError, PayloadError)
from .magic_links import MagicLinkService, MagicLinkResult, ValidationResult, MAGIC_LINK_TTL
from .onboarding import OnboardingService, SubmissionResult
from .store import OnboardingStore, get_store

__all__ = [
    'MagicLinkError', 'ConfigurationError', 'NotFound', 'InvalidToken', 'Expired',
    'AlreadyUsed', 'PersistenceError', 'PayloadError',
    'MagicLinkService', 'MagicLinkResult', 'ValidationResult', 'MAGIC_LINK_TTL',
    'OnboardingService', 'SubmissionResult', 'OnboardingStore', 'get_store',
]
