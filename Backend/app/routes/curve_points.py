# Backend/app/routes/curve_points.py

from flask import request

from Backend.app.mappers import curve_point_mapper
from Backend.app.routes.crud import CrudViews
from Backend.app.schemas import CurvePointForm


class CurvePointViews(CrudViews):
    """`/curvePoint/list?curve_id=<n>` shows a single curve ordered by term."""

    def __init__(self, service):
        super().__init__('curvePoint', service, curve_point_mapper, CurvePointForm,
                         label="Curve point")

    def load_records(self):
        curve_id = request.args.get('curve_id', type=int)
        if curve_id is not None:
            return self.service.find_by_curve_id(curve_id)
        return self.service.find_all()

    def list_context(self):
        return {'curve_id': request.args.get('curve_id', '')}


def create_curve_point_bp(service):
    return CurvePointViews(service).blueprint
