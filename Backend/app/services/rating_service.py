# Backend/app/services/rating_service.py

import logging

from sqlalchemy import func

from Backend.app.exceptions import BusinessRuleError
from Backend.app.models.reference_models import Rating
from Backend.app.services.base import CrudService
from Backend.app.utils.rating_scales import (
    AGENCIES,
    LAST_INVESTMENT_GRADE_ORDER,
    grades,
    is_valid_label,
)

logger = logging.getLogger(__name__)

_AGENCY_LABELS = {"MOODYS": "Moody's", "SP": "S&P", "FITCH": "Fitch"}


class RatingService(CrudService):
    model = Rating
    editable_fields = ('moodys_rating', 'sand_p_rating', 'fitch_rating', 'order_number')
    default_order = (Rating.order_number.asc(), Rating.id.asc())

    def validate(self, rating):
        labels = [getattr(rating, attr) for attr, _, _ in AGENCIES.values()]
        if not any(label and label.strip() for label in labels):
            raise BusinessRuleError("At least one rating agency notation must be provided")

        for agency, (attr, _, _) in AGENCIES.items():
            label = getattr(rating, attr)
            if not is_valid_label(agency, label):
                raise BusinessRuleError(f"Invalid {_AGENCY_LABELS[agency]} rating format: {label}")

        # agencies may disagree; that is recorded, not rejected
        graded = grades(rating.moodys_rating, rating.sand_p_rating, rating.fitch_rating)
        if True in graded and False in graded:
            logger.warning(f"Inconsistent ratings between agencies: {rating!r}")

        if rating.order_number is not None:
            if rating.order_number <= 0:
                raise BusinessRuleError("Order number must be positive")
            with self.session.no_autoflush:
                clash = (
                    self.session.query(Rating)
                    .filter(Rating.order_number == rating.order_number)
                    .first()
                )
            if clash is not None and clash.id != rating.id:
                raise BusinessRuleError(
                    f"Order number {rating.order_number} already exists. "
                    "Each rating must have a unique order number."
                )

    def before_create(self, rating):
        if rating.order_number is None:
            rating.order_number = self.next_order_number()

    def next_order_number(self):
        highest = self.session.query(func.max(Rating.order_number)).scalar()
        return (highest or 0) + 1

    # ---- extra queries -----------------------------------------------
    def find_by_order_range(self, min_order, max_order):
        if min_order is None or max_order is None or min_order > max_order:
            return []
        return (
            self.session.query(Rating)
            .filter(Rating.order_number.between(min_order, max_order))
            .order_by(Rating.order_number.asc())
            .all()
        )

    def find_investment_grade(self):
        return self.find_by_order_range(1, LAST_INVESTMENT_GRADE_ORDER)

    def find_speculative_grade(self):
        return (
            self.session.query(Rating)
            .filter(Rating.order_number > LAST_INVESTMENT_GRADE_ORDER)
            .order_by(Rating.order_number.asc())
            .all()
        )

    def find_by_agency(self, agency):
        """Ratings that carry a label from the given agency (MOODYS, SP, FITCH)."""
        if not agency or agency.upper() not in AGENCIES:
            return []
        attr, _, _ = AGENCIES[agency.upper()]
        column = getattr(Rating, attr)
        return (
            self.session.query(Rating)
            .filter(column.isnot(None), column != '')
            .order_by(Rating.order_number.asc())
            .all()
        )
