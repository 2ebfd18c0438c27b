from utils.helpers import utcnow
from .database import db


class MagicLink(db.Model):
    """Database model for single-use onboarding links sent to clients."""
    id = db.Column(db.Integer, primary_key=True)
    token = db.Column(db.String(36), nullable=False, unique=True, index=True)
    client_id = db.Column(db.Integer, db.ForeignKey('client.id'), nullable=False, index=True)
    prefilled_data = db.Column(db.JSON)
    used = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)
    used_at = db.Column(db.DateTime)

    def is_expired(self, now):
        return now > self.expires_at

    def is_active(self, now):
        return not self.used and not self.is_expired(now)

    def to_dict(self):
        return {
            'token': self.token,
            'client_id': self.client_id,
            'used': self.used,
            'created_at': self.created_at,
            'expires_at': self.expires_at,
            'used_at': self.used_at,
        }
