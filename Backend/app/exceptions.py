# Backend/app/exceptions.py
# ---------------------------
# Error kinds raised by services and caught at the blueprint boundary.


class PoseidonError(Exception):
    """Base class for all application errors."""


class NotFoundError(PoseidonError):
    """Requested id does not exist in the store."""

    def __init__(self, entity_name, entity_id):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} not found with id: {entity_id}")


class BusinessRuleError(PoseidonError):
    """Submitted values are well-formed but break a business rule."""


class StoreError(PoseidonError):
    """The relational store rejected or failed an operation."""


class FormValidationError(PoseidonError):
    """
    Field-level validation failure for a submitted form.
    `errors` maps field name -> message.
    """

    def __init__(self, errors):
        self.errors = dict(errors)
        super().__init__(f"Invalid fields: {', '.join(sorted(self.errors))}")
