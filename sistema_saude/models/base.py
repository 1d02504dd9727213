import uuid
from datetime import datetime, timezone

from sistema_saude.extensions import db


def new_id():
    """Opaque 32-char hex primary key."""
    return uuid.uuid4().hex


def utcnow():
    # Naive UTC, stored as-is by every backend
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    return value.isoformat() if value else None


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
