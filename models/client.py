from utils.helpers import utcnow
from .database import db

# Fields the onboarding wizard pre-fills and writes back
PROFILE_FIELDS = (
    'company_name', 'industry', 'website_url', 'phone', 'address',
    'google_maps_url', 'social_links', 'operational_contact', 'location_type',
    'service_area', 'operating_hours', 'seasonality', 'logo_url', 'brand_colors',
    'authority_signals', 'media_gallery', 'strategy_profile', 'review_signature',
    'competitors', 'review_incentives', 'buyer_persona', 'tone_of_voice', 'notes',
)


class Client(db.Model):
    """Database model for a client business managed by the agency."""
    id = db.Column(db.Integer, primary_key=True)
    company_name = db.Column(db.String(255), nullable=False)
    industry = db.Column(db.String(100))
    website_url = db.Column(db.String(500))
    phone = db.Column(db.String(50))
    address = db.Column(db.String(500))
    google_maps_url = db.Column(db.String(500))

    # Google Business Profile link
    gbp_location_id = db.Column(db.String(100))
    gbp_connected = db.Column(db.Boolean, default=False)

    # Step 1: identity and location
    social_links = db.Column(db.JSON)
    operational_contact = db.Column(db.JSON)  # {name, phone, email}
    location_type = db.Column(db.String(20))  # storefront, service_area
    service_area = db.Column(db.Text)

    # Step 2: hours
    operating_hours = db.Column(db.JSON)
    seasonality = db.Column(db.Text)

    # Step 3: branding
    logo_url = db.Column(db.String(500))
    brand_colors = db.Column(db.JSON)
    authority_signals = db.Column(db.JSON)
    media_gallery = db.Column(db.JSON)

    # Step 4: strategy
    strategy_profile = db.Column(db.JSON)
    buyer_persona = db.Column(db.JSON)
    tone_of_voice = db.Column(db.JSON)

    # Step 5: reputation
    review_signature = db.Column(db.Text)
    competitors = db.Column(db.JSON)
    review_incentives = db.Column(db.Text)

    # Subscription
    subscription_start_date = db.Column(db.Date)
    subscription_status = db.Column(db.String(20), default='active')  # active, paused, cancelled
    monthly_report_day = db.Column(db.Integer, default=1)
    notes = db.Column(db.Text)

    onboarding_status = db.Column(db.String(20), default='pending')  # pending, completed

    # Timestamps
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    # Tokens are kept for audit, never deleted with the client
    magic_links = db.relationship('MagicLink', backref='client', lazy=True,
                                  order_by='MagicLink.created_at.desc()')

    def to_dict(self):
        """Profile fields used to pre-fill the onboarding wizard"""
        data = {field: getattr(self, field) for field in PROFILE_FIELDS}
        data['id'] = self.id
        data['onboarding_status'] = self.onboarding_status
        return data
