# artlink/models/project.py
from datetime import datetime
from ..extensions import db
from .serializers import iso, money


PROJECT_STATUSES = ("open", "closed")
APPLICATION_STATUSES = ("pending", "accepted", "rejected")


class Project(db.Model):
    __tablename__ = "project"

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    title = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text)
    budget = db.Column(db.Numeric(10, 2))
    status = db.Column(db.String(20), nullable=False, default="open", index=True)  # open|closed
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    client = db.relationship('User', backref=db.backref('projects', lazy='dynamic'))

    def to_dict(self) -> dict:
        return {
            "projectId": self.id,
            "clientId": self.client_id,
            "title": self.title,
            "description": self.description,
            "budget": money(self.budget),
            "status": self.status,
            "createdAt": iso(self.created_at),
        }


class Application(db.Model):
    __tablename__ = "application"

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('project.id', ondelete="CASCADE"), nullable=False, index=True)
    freelancer_id = db.Column(db.Integer, db.ForeignKey('artist_profile.id', ondelete="CASCADE"), nullable=False, index=True)

    message = db.Column(db.Text)
    status = db.Column(db.String(50), nullable=False, default="pending", index=True)  # pending|accepted|rejected
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    project = db.relationship(
        'Project',
        backref=db.backref('applications', lazy='dynamic', cascade='all, delete-orphan'),
    )
    freelancer = db.relationship(
        'ArtistProfile',
        backref=db.backref('applications', lazy='dynamic', cascade='all, delete-orphan'),
    )

    def to_dict(self) -> dict:
        return {
            "applicationId": self.id,
            "projectId": self.project_id,
            "freelancerId": self.freelancer_id,
            "message": self.message,
            "status": self.status,
            "createdAt": iso(self.created_at),
            "project": self.project.to_dict() if self.project else None,
            "freelancer": self.freelancer.to_dict() if self.freelancer else None,
        }
