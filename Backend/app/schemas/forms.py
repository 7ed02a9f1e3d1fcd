# Backend/app/schemas/forms.py
# ---------------------------
# One schema per submitted HTML form. Field constraints mirror the column
# sizes in the models; business rules that need the store (uniqueness,
# cross-field consistency) live in the services.

import re
from typing import ClassVar, Literal, Optional

from pydantic import Field, field_validator

from Backend.app.schemas.base import (
    FormDateTime,
    FormModel,
    decimal_field,
    whole_field,
)
from Backend.app.utils.rating_scales import MOODYS_PATTERN, SP_PATTERN

Text125 = Optional[str]

PASSWORD_POLICY = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$')


class BidListForm(FormModel):
    account:        str = Field(max_length=30)
    type:           str = Field(max_length=30)
    bid_quantity:   decimal_field(10, 2, minimum=0) = None
    ask_quantity:   decimal_field(10, 2, minimum=0) = None
    bid:            decimal_field(10, 2, minimum=0) = None
    ask:            decimal_field(10, 2, minimum=0) = None
    benchmark:      Text125 = Field(None, max_length=125)
    commentary:     Text125 = Field(None, max_length=125)
    security:       Text125 = Field(None, max_length=125)
    status:         Optional[str] = Field(None, max_length=10)
    trader:         Text125 = Field(None, max_length=125)
    book:           Text125 = Field(None, max_length=125)
    creation_name:  Text125 = Field(None, max_length=125)
    revision_name:  Text125 = Field(None, max_length=125)
    deal_name:      Text125 = Field(None, max_length=125)
    deal_type:      Text125 = Field(None, max_length=125)
    source_list_id: Text125 = Field(None, max_length=125, title="Source list ID")
    side:           Text125 = Field(None, max_length=125)
    bid_list_date:  FormDateTime = None


class CurvePointForm(FormModel):
    curve_id:   whole_field(minimum=1) = Field(title="Curve ID")
    as_of_date: FormDateTime = None
    term:       decimal_field(10, 4, minimum=0)
    value:      decimal_field(10, 4)


class RatingForm(FormModel):
    """At least one agency label is required; the service enforces that."""
    moodys_rating: Optional[str] = Field(
        None, max_length=125, pattern=MOODYS_PATTERN.pattern, title="Moody's rating")
    sand_p_rating: Optional[str] = Field(
        None, max_length=125, pattern=SP_PATTERN.pattern, title="S&P rating")
    fitch_rating:  Optional[str] = Field(
        None, max_length=125, pattern=SP_PATTERN.pattern, title="Fitch rating")
    order_number:  whole_field(minimum=1) = None

    pattern_messages: ClassVar[dict] = {
        'moodys_rating': "Moody's rating must follow standard format (e.g., Aaa, Aa1, A2, Baa3, Ba1, B2, Caa1, Ca, C)",
        'sand_p_rating': "S&P rating must follow standard format (e.g., AAA, AA+, A-, BBB, BB+, B-, CCC, D)",
        'fitch_rating':  "Fitch rating must follow standard format (e.g., AAA, AA+, A-, BBB, BB+, B-, CCC, D)",
    }


class TradeForm(FormModel):
    account:        str = Field(max_length=30)
    type:           str = Field(max_length=30)
    buy_quantity:   decimal_field(10, 2, minimum=0, exclusive=True) = None
    sell_quantity:  decimal_field(10, 2, minimum=0, exclusive=True) = None
    buy_price:      decimal_field(10, 4, minimum=0, exclusive=True) = None
    sell_price:     decimal_field(10, 4, minimum=0, exclusive=True) = None
    trade_date:     FormDateTime = None
    benchmark:      Text125 = Field(None, max_length=125)
    security:       Text125 = Field(None, max_length=125)
    status:         Optional[str] = Field(None, max_length=10)
    trader:         Text125 = Field(None, max_length=125)
    book:           Text125 = Field(None, max_length=125)
    creation_name:  Text125 = Field(None, max_length=125)
    revision_name:  Text125 = Field(None, max_length=125)
    deal_name:      Text125 = Field(None, max_length=125)
    deal_type:      Text125 = Field(None, max_length=125)
    source_list_id: Text125 = Field(None, max_length=125, title="Source list ID")
    side:           Text125 = Field(None, max_length=125)

    required_messages: ClassVar[dict] = {
        'account': "Account is required",
        'type':    "Type is required",
    }


class RuleNameForm(FormModel):
    name:        str = Field(max_length=125, pattern=r'^[a-zA-Z0-9][a-zA-Z0-9_\-.]*$', title="Rule name")
    description: Text125 = Field(None, max_length=125)
    json_config: Text125 = Field(None, alias='json', max_length=125, title="JSON configuration")
    template:    Optional[str] = Field(None, max_length=512)
    sql_str:     Text125 = Field(None, max_length=125, title="SQL string")
    sql_part:    Text125 = Field(None, max_length=125, title="SQL part")

    required_messages: ClassVar[dict] = {'name': "Rule name is required"}
    pattern_messages: ClassVar[dict] = {
        'name': "Rule name must start with alphanumeric character and contain only "
                "alphanumeric characters, underscores, hyphens, and dots",
    }


class UserForm(FormModel):
    username: str = Field(min_length=3, max_length=50, pattern=r'^[a-zA-Z0-9_-]+$')
    password: str
    fullname: str = Field(min_length=2, max_length=100, pattern=r"^[a-zA-ZÀ-ÿ\s'-]+$", title="Full name")
    role:     Literal['USER', 'ADMIN']

    pattern_messages: ClassVar[dict] = {
        'username': "Username may only contain letters, digits, hyphens and underscores",
        'fullname': "Full name may only contain letters, spaces, hyphens and apostrophes",
    }

    @field_validator('password')
    @classmethod
    def check_password_policy(cls, value):
        if not PASSWORD_POLICY.match(value):
            raise ValueError(
                "Password must contain at least 8 characters, one uppercase letter, "
                "one digit and one symbol (@$!%*?&)"
            )
        return value
