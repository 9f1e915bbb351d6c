# artlink/models/user.py
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import UserMixin
from ..extensions import db
from .serializers import iso, money, split_csv


ROLES = ("client", "artist", "admin")


# ------- Core Models -------

class User(UserMixin, db.Model):
    __tablename__ = "user"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)

    password_hash = db.Column(db.String(255))

    # client|artist|admin
    role = db.Column(db.String(20), nullable=False, default="client", index=True)

    # active|suspended
    status = db.Column(db.String(20), default="active", index=True)

    last_login_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    # Profiles (one-to-one)
    client_profile = db.relationship(
        "ClientProfile",
        backref="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    artist_profile = db.relationship(
        "ArtistProfile",
        backref="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    # --- Auth helpers ---
    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    @property
    def is_suspended(self) -> bool:
        return self.status == "suspended"

    def mark_login(self):
        self.last_login_at = datetime.utcnow()

    def to_dict(self) -> dict:
        return {
            "userId": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "createdAt": iso(self.created_at),
        }


class ClientProfile(db.Model):
    __tablename__ = "client_profile"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), unique=True, nullable=False, index=True)
    company = db.Column(db.String(255))

    def to_dict(self) -> dict:
        return {"clientId": self.id, "userId": self.user_id, "company": self.company}


class ArtistProfile(db.Model):
    __tablename__ = "artist_profile"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), unique=True, nullable=False, index=True)

    # Public/profile info shown when browsing artists
    title = db.Column(db.String(160))
    bio = db.Column(db.Text)
    skills = db.Column(db.Text)                 # comma separated
    hourly_rate = db.Column(db.Numeric(10, 2))
    category = db.Column(db.String(50), index=True)
    availability = db.Column(db.String(50))

    def to_dict(self) -> dict:
        return {
            "artistId": self.id,
            "userId": self.user_id,
            "name": self.user.name if self.user else None,
            "title": self.title,
            "bio": self.bio,
            "skills": split_csv(self.skills),
            "hourlyRate": money(self.hourly_rate),
            "category": self.category,
            "availability": self.availability,
        }
