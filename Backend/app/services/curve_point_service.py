# Backend/app/services/curve_point_service.py

from Backend.app.exceptions import BusinessRuleError
from Backend.app.models.reference_models import CurvePoint
from Backend.app.models.trading_models import utcnow
from Backend.app.services.base import CrudService


class CurvePointService(CrudService):
    model = CurvePoint
    # creation_date is written once, in before_create
    editable_fields = ('curve_id', 'as_of_date', 'term', 'value')

    def validate(self, point):
        if point.curve_id is None or point.curve_id <= 0:
            raise BusinessRuleError("Curve ID is required and must be positive")
        if point.term is None or point.term < 0:
            raise BusinessRuleError("Term is required and must be positive or zero")
        if point.value is None:
            raise BusinessRuleError("Value is required")

    def before_create(self, point):
        now = utcnow()
        point.creation_date = now
        if point.as_of_date is None:
            point.as_of_date = now

    def before_update(self, point):
        # a blank as-of date keeps the stored one
        if point.as_of_date is None:
            stored = self.find_by_id(point.id)
            if stored is not None:
                point.as_of_date = stored.as_of_date

    def find_by_curve_id(self, curve_id):
        """All points of one curve, ordered by term."""
        if curve_id is None or curve_id <= 0:
            return []
        return (
            self.session.query(CurvePoint)
            .filter_by(curve_id=curve_id)
            .order_by(CurvePoint.term.asc())
            .all()
        )
