# Backend/app/schemas/__init__.py

from .base  import FormModel
from .forms import (
    BidListForm,
    CurvePointForm,
    RatingForm,
    RuleNameForm,
    TradeForm,
    UserForm,
)

__all__ = [
    "FormModel", "BidListForm", "CurvePointForm", "RatingForm",
    "RuleNameForm", "TradeForm", "UserForm",
]
