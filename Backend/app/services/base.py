# Backend/app/services/base.py

import logging

from sqlalchemy.exc import SQLAlchemyError

from Backend.app.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)


class CrudService:
    """
    Persistence gateway for one entity type.

    Holds an explicit session (normally the request-scoped `db.session`) and
    exposes create / find_by_id / find_all / update / delete_by_id. Every
    write is a single-row transaction: commit on success, rollback and
    StoreError on any SQLAlchemy failure. Lookups by id and the queries run
    by validate() report failures the same way.

    Subclasses set:
      - model:           the db.Model class
      - editable_fields: columns an update may overwrite (id and audit
                         stamps are deliberately absent)
      - default_order:   list of columns for find_all()
    and may override validate(), before_create(), before_update().
    """
    model = None
    editable_fields = ()
    default_order = ()

    def __init__(self, session):
        self.session = session

    @property
    def entity_name(self):
        return self.model.__name__

    # ---- hooks -------------------------------------------------------
    def validate(self, entity):
        """Raise BusinessRuleError when `entity` breaks a business rule."""

    def before_create(self, entity):
        pass

    def before_update(self, entity):
        pass

    # ---- reads -------------------------------------------------------
    def find_all(self):
        query = self.session.query(self.model)
        order = self.default_order or (self.model.id.asc(),)
        return query.order_by(*order).all()

    def find_by_id(self, entity_id):
        if entity_id is None or entity_id <= 0:
            return None
        try:
            return self.session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            self._fail(f"find {self.entity_name} {entity_id}", e)

    def exists_by_id(self, entity_id):
        return self.find_by_id(entity_id) is not None

    # ---- writes ------------------------------------------------------
    def create(self, entity):
        """Persist a new entity and return it with its generated id."""
        try:
            self.before_create(entity)
            self.validate(entity)
        except SQLAlchemyError as e:
            # validate() may query the store (uniqueness checks)
            self._fail(f"check {self.entity_name}", e)
        self.session.add(entity)
        self._commit(f"create {self.entity_name}")
        logger.info(f"{self.entity_name} created with id {entity.id}")
        return entity

    def update(self, entity):
        """
        Overwrite the editable fields of the stored row with those of
        `entity` (which carries the id). Raises NotFoundError when the id is
        unknown; the store is untouched in that case.
        """
        existing = self.find_by_id(entity.id)
        if existing is None:
            raise NotFoundError(self.entity_name, entity.id)

        if entity is not existing:
            # validate the submitted copy before touching the stored row
            self._copy_untouched(existing, entity)
        try:
            self.before_update(entity)
            self.validate(entity)
        except SQLAlchemyError as e:
            self._fail(f"check {self.entity_name} {entity.id}", e)
        except Exception:
            # a caller may have passed the attached row itself
            self.session.rollback()
            raise

        for field in self.editable_fields:
            setattr(existing, field, getattr(entity, field))
        self._copy_stamps(entity, existing)
        self._commit(f"update {self.entity_name} {entity.id}")
        logger.info(f"{self.entity_name} {existing.id} updated")
        return existing

    def delete_by_id(self, entity_id):
        existing = self.find_by_id(entity_id)
        if existing is None:
            raise NotFoundError(self.entity_name, entity_id)
        self.session.delete(existing)
        self._commit(f"delete {self.entity_name} {entity_id}")
        logger.info(f"{self.entity_name} {entity_id} deleted")

    # ---- internals ---------------------------------------------------
    def _non_editable_columns(self):
        return [
            c.key for c in self.model.__table__.columns
            if c.key != 'id' and c.key not in self.editable_fields
        ]

    def _copy_untouched(self, source, target):
        # target is a detached working copy: give it the stored audit values
        for key in self._non_editable_columns():
            setattr(target, key, getattr(source, key))

    def _copy_stamps(self, source, target):
        # before_update may stamp non-editable columns (e.g. revision_date)
        for key in self._non_editable_columns():
            setattr(target, key, getattr(source, key))

    def _commit(self, action):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self._fail(action, e)

    def _fail(self, action, error):
        self.session.rollback()
        logger.exception(f"Store failure during {action}: {error}")
        raise StoreError(f"Could not {action}") from error
