# Backend/app/models/__init__.py

from .trading_models   import BidList, Trade

from .reference_models import (
    CurvePoint, Rating, RuleName,
)

from .user_models      import User

__all__ = [
    "BidList", "Trade",
    "CurvePoint", "Rating", "RuleName",
    "User",
]
