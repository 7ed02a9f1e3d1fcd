# Backend/app/mappers/__init__.py

from .view_models import (
    bid_list_mapper,
    curve_point_mapper,
    rating_mapper,
    rule_name_mapper,
    trade_mapper,
    user_mapper,
)

__all__ = [
    "bid_list_mapper", "curve_point_mapper", "rating_mapper",
    "rule_name_mapper", "trade_mapper", "user_mapper",
]
