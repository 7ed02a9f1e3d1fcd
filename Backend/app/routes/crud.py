# Backend/app/routes/crud.py

import logging

from flask import Blueprint, abort, flash, redirect, render_template, request, session, url_for
from sqlalchemy.exc import SQLAlchemyError

from Backend.app.exceptions import (
    BusinessRuleError,
    FormValidationError,
    NotFoundError,
    StoreError,
)

logger = logging.getLogger(__name__)

STORE_FAILURE_MESSAGE = "A database error occurred. Please try again later."


class CrudViews:
    """
    Builds the blueprint for one entity:

      GET  /<name>/list              list page
      GET  /<name>/add               empty add form
      POST /<name>/validate          validate + create, redirect to list
      GET  /<name>/update/<id>       pre-filled update form
      POST /<name>/update/<id>       validate + update, redirect to list
      GET  /<name>/delete/<id>       delete, redirect to list

    The service, mapper and form schema are handed in by the caller; the
    views never touch db.session directly. Subclasses may override
    load_records() to honour list filters from the query string.
    """

    def __init__(self, name, service, mapper, form_class, label, admin_only=False):
        self.name = name
        self.service = service
        self.mapper = mapper
        self.form_class = form_class
        self.label = label

        self.blueprint = Blueprint(name, __name__, url_prefix=f'/{name}')
        if admin_only:
            self.blueprint.before_request(self.require_admin)

        bp = self.blueprint
        bp.add_url_rule('/list', 'list', self.list_view, methods=['GET'])
        bp.add_url_rule('/add', 'add', self.add_form, methods=['GET'])
        bp.add_url_rule('/validate', 'validate', self.validate, methods=['POST'])
        bp.add_url_rule('/update/<int:entity_id>', 'show_update', self.show_update, methods=['GET'])
        bp.add_url_rule('/update/<int:entity_id>', 'update', self.update, methods=['POST'])
        bp.add_url_rule('/delete/<int:entity_id>', 'delete', self.delete, methods=['GET'])

    # ---- hooks -------------------------------------------------------
    def load_records(self):
        return self.service.find_all()

    def list_context(self):
        """Extra template variables for the list page (active filters...)."""
        return {}

    @staticmethod
    def require_admin():
        if session.get('role') != 'ADMIN':
            logger.warning(f"User '{session.get('username')}' denied access to {request.path}")
            abort(403)

    # ---- rendering ---------------------------------------------------
    def _list_url(self):
        return url_for(f'{self.name}.list')

    def _render_list(self, records, error_message=None):
        return render_template(
            f'{self.name}/list.html',
            records=records,
            error_message=error_message,
            **self.list_context(),
        )

    def _render_form(self, values=None, errors=None, entity_id=None, error_message=None):
        return render_template(
            f'{self.name}/form.html',
            values=values or {},
            errors=errors or {},
            entity_id=entity_id,
            error_message=error_message,
        )

    # ---- views -------------------------------------------------------
    def list_view(self):
        try:
            records = self.mapper.to_views(self.load_records())
        except (StoreError, SQLAlchemyError) as e:
            logger.exception(f"Could not load {self.name} list: {e}")
            return self._render_list(None, error_message=STORE_FAILURE_MESSAGE)
        return self._render_list(records)

    def add_form(self):
        return self._render_form()

    def validate(self):
        return self._save(entity_id=None)

    def show_update(self, entity_id):
        try:
            entity = self.service.find_by_id(entity_id)
        except StoreError as e:
            logger.error(f"Could not load {self.name} {entity_id}: {e}")
            flash(STORE_FAILURE_MESSAGE, 'error')
            return redirect(self._list_url())
        if entity is None:
            flash(str(NotFoundError(self.service.entity_name, entity_id)), 'error')
            return redirect(self._list_url())
        return self._render_form(values=self.mapper.to_form_data(entity), entity_id=entity_id)

    def update(self, entity_id):
        return self._save(entity_id=entity_id)

    def delete(self, entity_id):
        try:
            self.service.delete_by_id(entity_id)
        except NotFoundError as e:
            flash(str(e), 'error')
        except StoreError as e:
            flash(STORE_FAILURE_MESSAGE, 'error')
            logger.error(f"Delete of {self.name} {entity_id} failed: {e}")
        else:
            flash(f"{self.label} successfully deleted", 'success')
        return redirect(self._list_url())

    def _save(self, entity_id):
        """Shared submit path for add (entity_id None) and update."""
        submitted = request.form.to_dict()
        try:
            form = self.form_class.from_form(submitted)
            entity = self.mapper.to_entity(form, entity_id=entity_id)
            if entity_id is None:
                self.service.create(entity)
            else:
                self.service.update(entity)
        except FormValidationError as e:
            logger.info(f"Rejected {self.name} form: {e}")
            return self._render_form(values=submitted, errors=e.errors, entity_id=entity_id)
        except BusinessRuleError as e:
            logger.warning(f"Business rule violated on {self.name}: {e}")
            return self._render_form(values=submitted, entity_id=entity_id, error_message=str(e))
        except NotFoundError as e:
            flash(str(e), 'error')
            return redirect(self._list_url())
        except StoreError as e:
            logger.error(f"Save of {self.name} failed: {e}")
            return self._render_form(
                values=submitted, entity_id=entity_id, error_message=STORE_FAILURE_MESSAGE)

        action = 'added' if entity_id is None else 'updated'
        flash(f"{self.label} successfully {action}", 'success')
        return redirect(self._list_url())
