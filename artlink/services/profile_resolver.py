# artlink/services/profile_resolver.py
"""Map role profiles to their owning users.

Commission rows store user ids for both parties, while the frontend refers to
artists by either their artist-profile id or their user id. The resolver
settles which one a reference means.
"""
from dataclasses import dataclass
from typing import Optional, Union

from ..extensions import db
from ..models.user import User, ClientProfile, ArtistProfile


@dataclass(frozen=True)
class ResolvedUser:
    user_id: int
    artist_profile_id: Optional[int] = None


@dataclass(frozen=True)
class ArtistNotFound:
    reference: object


ArtistResolution = Union[ResolvedUser, ArtistNotFound]


def _to_int(val) -> Optional[int]:
    if isinstance(val, bool):
        return None
    try:
        return int(str(val).strip())
    except (TypeError, ValueError):
        return None


def resolve_artist_reference(ref) -> ArtistResolution:
    """Artist-profile id first, then a plain user id."""
    ref_id = _to_int(ref)
    if ref_id is None:
        return ArtistNotFound(ref)

    profile = db.session.get(ArtistProfile, ref_id)
    if profile is not None:
        return ResolvedUser(user_id=profile.user_id, artist_profile_id=profile.id)

    user = db.session.get(User, ref_id)
    if user is not None:
        own = user.artist_profile
        return ResolvedUser(user_id=user.id, artist_profile_id=own.id if own else None)

    return ArtistNotFound(ref)


def client_profile_for(user_id) -> Optional[ClientProfile]:
    if user_id is None:
        return None
    return ClientProfile.query.filter_by(user_id=user_id).first()


def artist_profile_for(user_id) -> Optional[ArtistProfile]:
    if user_id is None:
        return None
    return ArtistProfile.query.filter_by(user_id=user_id).first()
