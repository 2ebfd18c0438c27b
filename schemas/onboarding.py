"""
Onboarding questionnaire payload.

The wizard has five steps; each step's fields are optional except the
company name, the location mode and the operational contact.
"""
from typing import Dict, List, Literal, Optional
from urllib.parse import urlparse
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')


class _Schema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


# Step 1: Vital intelligence

class SocialLinks(_Schema):
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    youtube: Optional[str] = None


class OperationalContact(_Schema):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: EmailStr


# Step 2: The time machine

class SplitHours(_Schema):
    morning_open: str
    morning_close: str
    afternoon_open: str
    afternoon_close: str


class DayHours(_Schema):
    open: str
    close: str
    closed: bool
    split_hours: Optional[SplitHours] = None


# Step 3: Visual & authority

class BrandColors(_Schema):
    primary: str
    secondary: str


class AuthoritySignals(_Schema):
    certifications: List[str]
    warranties: Optional[str] = None


class MediaItem(_Schema):
    url: str
    type: Literal['team', 'work', 'equipment']


# Step 4: The strategy engine

class VibeSliders(_Schema):
    tone: int = Field(ge=0, le=100)  # formal <-> friendly
    expertise: int = Field(ge=0, le=100)  # popularized <-> highly technical
    style: int = Field(ge=0, le=100)  # minimalist <-> emoji-rich


class StrategyProfile(_Schema):
    vibe_sliders: VibeSliders
    pitch: Optional[str] = None
    differentiators: List[str] = Field(max_length=3)
    persona: Optional[str] = None
    keywords: List[str]


# Step 5: Reputation protocol

class Competitor(_Schema):
    name: str
    url: Optional[str] = None


class OnboardingForm(_Schema):
    company_name: str = Field(min_length=1)
    website_url: Optional[str] = None
    social_links: Optional[SocialLinks] = None
    location_type: Literal['storefront', 'service_area']
    address: Optional[str] = None
    service_area: Optional[str] = None
    operational_contact: OperationalContact

    operating_hours: Optional[Dict[str, DayHours]] = None
    seasonality: Optional[str] = None

    logo_url: Optional[str] = None
    brand_colors: Optional[BrandColors] = None
    authority_signals: Optional[AuthoritySignals] = None
    media_gallery: Optional[List[MediaItem]] = None

    strategy_profile: Optional[StrategyProfile] = None

    review_signature: Optional[str] = None
    competitors: Optional[List[Competitor]] = None
    review_incentives: Optional[str] = None

    @field_validator('website_url')
    @classmethod
    def check_website_url(cls, value):
        if not value:
            return value
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError('Invalid URL')
        return value

    @field_validator('operating_hours')
    @classmethod
    def check_weekdays(cls, value):
        if value:
            unknown = sorted(set(value) - set(WEEKDAYS))
            if unknown:
                raise ValueError(f"Unknown day(s): {', '.join(unknown)}")
        return value
