from .onboarding import OnboardingForm, WEEKDAYS

__all__ = ['OnboardingForm', 'WEEKDAYS']
