# Backend/app/routes/bid_list.py

from Backend.app.mappers import bid_list_mapper
from Backend.app.routes.crud import CrudViews
from Backend.app.schemas import BidListForm


def create_bid_list_bp(service):
    """Blueprint for /bidList/*."""
    return CrudViews('bidList', service, bid_list_mapper, BidListForm, label="Bid").blueprint
