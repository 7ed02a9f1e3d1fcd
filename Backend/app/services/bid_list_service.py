# Backend/app/services/bid_list_service.py

from Backend.app.exceptions import BusinessRuleError
from Backend.app.models.trading_models import BidList, utcnow
from Backend.app.services.base import CrudService


class BidListService(CrudService):
    model = BidList
    editable_fields = (
        'account', 'type', 'bid_quantity', 'ask_quantity', 'bid', 'ask',
        'benchmark', 'bid_list_date', 'commentary', 'security', 'status',
        'trader', 'book', 'creation_name', 'revision_name', 'deal_name',
        'deal_type', 'source_list_id', 'side',
    )

    def validate(self, bid):
        if not (bid.account or '').strip():
            raise BusinessRuleError("Account is required")
        if not (bid.type or '').strip():
            raise BusinessRuleError("Type is required")
        if bid.bid_quantity is not None and bid.bid_quantity < 0:
            raise BusinessRuleError("Bid quantity cannot be negative")

    def before_create(self, bid):
        bid.creation_date = utcnow()

    def before_update(self, bid):
        bid.revision_date = utcnow()
