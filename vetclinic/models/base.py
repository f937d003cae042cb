import uuid
from datetime import datetime, timezone

from vetclinic.extensions import db


def utcnow():
    """Naive UTC timestamp, the form stored in every audit column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id():
    return str(uuid.uuid4())


def isoformat(value):
    return value.isoformat() if value else None


class AuditMixin:
    """
    Identifier, soft-delete flag and audit stamps shared by every table.
    Rows are never hard-deleted; ``active_status=False`` hides them from reads.
    """
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    active_status = db.Column(db.Boolean, nullable=False, default=True, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    created_by = db.Column(db.String(36), nullable=True)
    modified_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    modified_by = db.Column(db.String(36), nullable=True)

    def audit_dict(self):
        return {
            'active_status': self.active_status,
            'created_at': isoformat(self.created_at),
            'created_by': self.created_by,
            'modified_at': isoformat(self.modified_at),
            'modified_by': self.modified_by,
        }
