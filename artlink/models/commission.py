# artlink/models/commission.py
from datetime import datetime
from ..extensions import db
from .serializers import iso, money


COMMISSION_STATUSES = ("pending", "accepted", "rejected", "completed")


class CommissionRequest(db.Model):
    __tablename__ = "commission_request"

    id = db.Column(db.Integer, primary_key=True)
    # Both parties are stored as user ids, never as profile ids
    artist_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    client_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="pending", index=True)  # pending|accepted|rejected|completed

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    artist = db.relationship('User', foreign_keys=[artist_id],
                             backref=db.backref('commissions_as_artist', lazy='dynamic'))
    client = db.relationship('User', foreign_keys=[client_id],
                             backref=db.backref('commissions_as_client', lazy='dynamic'))

    progress_updates = db.relationship(
        'CommissionProgressUpdate',
        back_populates='commission',
        order_by='CommissionProgressUpdate.position',
        lazy='selectin',
        cascade='all, delete-orphan',
    )

    def add_progress_update(self, message: str, image_url: str | None = None) -> "CommissionProgressUpdate":
        """Append an update after the last one; positions are 1-based."""
        position = max((u.position for u in self.progress_updates), default=0) + 1
        update = CommissionProgressUpdate(
            commission=self,
            position=position,
            message=message,
            image_url=image_url,
        )
        db.session.add(update)
        return update

    def to_dict(self, include=("artist", "client")) -> dict:
        data = {
            "id": self.id,
            "artistId": self.artist_id,
            "clientId": self.client_id,
            "description": self.description,
            "price": money(self.price),
            "status": self.status,
            "progressUpdates": [u.to_dict() for u in self.progress_updates],
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
        if "artist" in include:
            data["artist"] = self.artist.to_dict() if self.artist else None
        if "client" in include:
            data["client"] = self.client.to_dict() if self.client else None
        return data


class CommissionProgressUpdate(db.Model):
    __tablename__ = "commission_progress_update"

    id = db.Column(db.Integer, primary_key=True)
    commission_id = db.Column(db.Integer, db.ForeignKey('commission_request.id'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False)
    message = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    commission = db.relationship('CommissionRequest', back_populates='progress_updates')

    __table_args__ = (
        db.UniqueConstraint("commission_id", "position", name="uq_progress_commission_position"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "commissionId": self.commission_id,
            "position": self.position,
            "message": self.message,
            "imageUrl": self.image_url,
            "createdAt": iso(self.created_at),
        }
