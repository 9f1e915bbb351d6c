# artlink/models/availability.py
from datetime import datetime
from ..extensions import db
from .serializers import iso, money, split_csv


AVAILABILITY_CATEGORIES = ("illustration", "design", "animation", "photography", "writing", "other")
AVAILABILITY_TYPES = ("immediate", "within-week", "flexible")
AVAILABILITY_STATUSES = ("active", "paused", "closed")


class AvailabilityPost(db.Model):
    __tablename__ = "availability_post"

    id = db.Column(db.Integer, primary_key=True)
    artist_id = db.Column(db.Integer, db.ForeignKey('artist_profile.id'), nullable=False, index=True)

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False, default="other", index=True)
    availability_type = db.Column(db.String(30), nullable=False, default="flexible")
    duration = db.Column(db.String(120))
    budget = db.Column(db.Numeric(10, 2))
    location = db.Column(db.String(120))
    skills = db.Column(db.Text)                          # comma separated
    portfolio_samples = db.Column(db.JSON, default=list)  # list of image URLs
    contact_preference = db.Column(db.String(50), default="platform")
    status = db.Column(db.String(20), nullable=False, default="active", index=True)  # active|paused|closed

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    artist = db.relationship(
        'ArtistProfile',
        backref=db.backref('availability_posts', lazy='dynamic', cascade='all, delete-orphan'),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "artistId": self.artist_id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "availabilityType": self.availability_type,
            "duration": self.duration,
            "budget": money(self.budget),
            "location": self.location,
            "skills": split_csv(self.skills),
            "portfolioSamples": list(self.portfolio_samples or []),
            "contactPreference": self.contact_preference,
            "status": self.status,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
            "artist": self.artist.to_dict() if self.artist else None,
        }
