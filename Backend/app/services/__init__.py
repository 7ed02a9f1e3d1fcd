# Backend/app/services/__init__.py

from .base                import CrudService
from .bid_list_service    import BidListService
from .curve_point_service import CurvePointService
from .rating_service      import RatingService
from .rule_name_service   import RuleNameService
from .trade_service       import TradeService
from .user_service        import UserService


def build_services(session):
    """
    Wire one gateway per entity around the given session. Called once by
    the app factory; blueprints receive their service from this mapping.
    """
    return {
        'bid_list':    BidListService(session),
        'curve_point': CurvePointService(session),
        'rating':      RatingService(session),
        'rule_name':   RuleNameService(session),
        'trade':       TradeService(session),
        'user':        UserService(session),
    }


__all__ = [
    "CrudService", "BidListService", "CurvePointService", "RatingService",
    "RuleNameService", "TradeService", "UserService", "build_services",
]
