# artlink/models/portfolio.py
from datetime import datetime
from ..extensions import db
from .serializers import iso


class Portfolio(db.Model):
    __tablename__ = "portfolio"

    id = db.Column(db.Integer, primary_key=True)
    freelancer_id = db.Column(db.Integer, db.ForeignKey('artist_profile.id'), nullable=False, index=True)

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    image_url = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    freelancer = db.relationship(
        'ArtistProfile',
        backref=db.backref('portfolios', lazy='dynamic', cascade='all, delete-orphan'),
    )
    tag_rows = db.relationship(
        'PortfolioTag',
        back_populates='portfolio',
        order_by='PortfolioTag.id',
        lazy='selectin',
        cascade='all, delete-orphan',
    )

    @property
    def tags(self) -> list[str]:
        return [t.name for t in self.tag_rows]

    def set_tags(self, names):
        self.tag_rows = [PortfolioTag(name=n) for n in names]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "freelancerId": self.freelancer_id,
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
            "tags": self.tags,
            "createdAt": iso(self.created_at),
            "freelancer": self.freelancer.to_dict() if self.freelancer else None,
        }


class PortfolioTag(db.Model):
    __tablename__ = "portfolio_tag"

    id = db.Column(db.Integer, primary_key=True)
    portfolio_id = db.Column(db.Integer, db.ForeignKey('portfolio.id'), nullable=False, index=True)
    name = db.Column(db.String(80), nullable=False, index=True)

    portfolio = db.relationship('Portfolio', back_populates='tag_rows')

    __table_args__ = (
        db.UniqueConstraint("portfolio_id", "name", name="uq_portfolio_tag"),
    )
