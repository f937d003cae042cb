"""
Shared repository behaviour for every soft-deletable table.

Each repository owns one model and offers create / fetch_by_id / update /
deactivate plus entity-specific ``list_by_*`` filters. Reads only ever see
rows with ``active_status=True``.
"""
import logging
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from vetclinic.extensions import db
from vetclinic.exceptions import BadRequest, NotFound, PersistenceError
from vetclinic.models.base import new_id, utcnow

logger = logging.getLogger(__name__)


def is_empty(value):
    """True for values a partial update treats as "not provided"."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ''
    if isinstance(value, (bool, int, float)):
        return value == 0
    return False


def is_blank(value):
    return is_empty(value) or (isinstance(value, str) and not value.strip())


def parse_string(field, value):
    if not isinstance(value, str):
        raise BadRequest(f'Field "{field}" must be a string')
    return value


def parse_datetime(field, value):
    """ISO 8601 string -> naive UTC datetime."""
    if not isinstance(value, str):
        raise BadRequest(f'Field "{field}" must be an ISO 8601 datetime string')
    try:
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        raise BadRequest(f'Invalid {field} format. Use ISO 8601, e.g. 2024-05-01T10:30:00')
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_positive_int(field, value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise BadRequest(f'Field "{field}" must be a positive integer')
    return value


@contextmanager
def persistence_guard(action):
    """Roll back and surface store failures as an opaque PersistenceError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Database error while trying to {action}: {e}", exc_info=True)
        raise PersistenceError(f'Failed to {action}') from e


class BaseRepository:
    model = None
    entity_name = 'Record'
    required_fields = ()
    updatable_fields = ()
    # accepted on create only, never merged on update
    create_fields = ()
    # field -> parser(field, value); anything not listed must be a string
    parsers = {}

    @property
    def noun(self):
        return self.entity_name.lower()

    # -- validation ---------------------------------------------------------

    def validate_required(self, data):
        """All required fields are reported together, not one at a time."""
        if any(is_blank(data.get(f)) for f in self.required_fields):
            raise BadRequest(self.required_message())

    def required_message(self):
        fields = [f'"{f}"' for f in self.required_fields]
        if len(fields) == 1:
            return f'Field {fields[0]} is required'
        return f'Fields {", ".join(fields[:-1])} and {fields[-1]} are required'

    def parse(self, field, value):
        parser = self.parsers.get(field, parse_string)
        return parser(field, value)

    # -- stamping -----------------------------------------------------------

    def stamp_created(self, instance, actor):
        now = utcnow()
        instance.id = instance.id or new_id()
        instance.active_status = True
        instance.created_at = now
        instance.created_by = actor
        instance.modified_at = now
        instance.modified_by = actor
        return instance

    def stamp_modified(self, instance, actor):
        instance.modified_at = utcnow()
        instance.modified_by = actor
        return instance

    # -- hooks --------------------------------------------------------------

    def check_references(self, values):
        """Raise NotFound when a referenced parent row is missing or inactive."""

    def build(self, values):
        return self.model(**values)

    # -- operations ---------------------------------------------------------

    def create(self, data, actor):
        self.validate_required(data)
        fields = set(self.required_fields) | set(self.updatable_fields) | set(self.create_fields)
        values = {f: self.parse(f, data[f]) for f in fields if not is_empty(data.get(f))}
        self.check_references(values)

        instance = self.stamp_created(self.build(values), actor)
        with persistence_guard(f'create {self.noun}'):
            db.session.add(instance)
            db.session.commit()
        logger.info(f"{self.entity_name} {instance.id} created by {actor}")
        return instance

    def find_active(self, entity_id):
        """Active row or None."""
        with persistence_guard(f'fetch {self.noun}'):
            return self.model.query.filter_by(id=entity_id, active_status=True).first()

    def fetch_by_id(self, entity_id):
        instance = self.find_active(entity_id)
        if instance is None:
            raise NotFound(f'{self.entity_name} not found')
        return instance

    def merge(self, instance, data):
        """
        Overwrite a field only when the incoming value is non-empty.
        An empty string or zero means "leave unchanged"; fields cannot be cleared.
        """
        changes = {}
        for field in self.updatable_fields:
            value = data.get(field)
            if is_empty(value):
                continue
            changes[field] = self.parse(field, value)
        self.check_references(changes)
        for field, value in changes.items():
            setattr(instance, field, value)
        return changes

    def update(self, entity_id, data, actor):
        instance = self.fetch_by_id(entity_id)
        self.merge(instance, data)
        self.stamp_modified(instance, actor)
        with persistence_guard(f'update {self.noun}'):
            db.session.commit()
        return instance

    def deactivate(self, entity_id, actor):
        """Soft delete. Idempotent: an already inactive or unknown id is not an error."""
        with persistence_guard(f'deactivate {self.noun}'):
            self.model.query.filter_by(id=entity_id).update(
                {'active_status': False, 'modified_at': utcnow(), 'modified_by': actor},
                synchronize_session=False,
            )
            db.session.commit()
        logger.info(f"{self.entity_name} {entity_id} deactivated by {actor}")

    def list_active(self, *criteria, order_by=None, **filters):
        query = self.model.query.filter_by(active_status=True, **filters)
        if criteria:
            query = query.filter(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        with persistence_guard(f'fetch {self.noun} list'):
            return query.all()
