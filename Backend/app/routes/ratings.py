# Backend/app/routes/ratings.py

from flask import request

from Backend.app.mappers import rating_mapper
from Backend.app.routes.crud import CrudViews
from Backend.app.schemas import RatingForm

GRADE_FILTERS = ('investment', 'speculative')


class RatingViews(CrudViews):
    """
    `/rating/list?grade=investment` and `?grade=speculative` split the list
    at the last investment-grade order number; any other value is ignored.
    """

    def __init__(self, service):
        super().__init__('rating', service, rating_mapper, RatingForm, label="Rating")

    def _grade(self):
        grade = request.args.get('grade', '').strip().lower()
        return grade if grade in GRADE_FILTERS else None

    def load_records(self):
        grade = self._grade()
        if grade == 'investment':
            return self.service.find_investment_grade()
        if grade == 'speculative':
            return self.service.find_speculative_grade()
        return self.service.find_all()

    def list_context(self):
        return {'grade': self._grade()}


def create_rating_bp(service):
    return RatingViews(service).blueprint
