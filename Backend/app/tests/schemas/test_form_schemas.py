from datetime import datetime

import pytest
from werkzeug.datastructures import MultiDict

from Backend.app.exceptions import FormValidationError
from Backend.app.schemas import (
    BidListForm,
    CurvePointForm,
    RatingForm,
    RuleNameForm,
    TradeForm,
    UserForm,
)


def _errors(form_class, data):
    with pytest.raises(FormValidationError) as exc:
        form_class.from_form(data)
    return exc.value.errors


# ---- bid list -----------------------------------------------------------

def test_bid_form_accepts_multidict_and_blanks():
    form = BidListForm.from_form(MultiDict({
        "account": "  ACC1 ", "type": "Buy", "bid_quantity": "10.5",
        "ask_quantity": "", "commentary": "   ",
    }))
    assert form.account == "ACC1"
    assert form.bid_quantity == 10.5
    assert form.ask_quantity is None
    assert form.commentary is None


def test_bid_form_required_fields():
    errors = _errors(BidListForm, {"account": "", "type": "  "})
    assert errors == {"account": "Account is mandatory", "type": "Type is mandatory"}


@pytest.mark.parametrize("raw, message", [
    ("abc", "Bid quantity must be a valid number"),
    ("-1", "Bid quantity must be positive or zero"),
    ("10.555", "Bid quantity must be a valid number with max 2 decimal places"),
    ("nan", "Bid quantity must be a valid number"),
])
def test_bid_form_quantity_checks(raw, message):
    errors = _errors(BidListForm, {"account": "A", "type": "T", "bid_quantity": raw})
    assert errors["bid_quantity"] == message


def test_bid_form_length_limits():
    errors = _errors(BidListForm, {"account": "A" * 31, "type": "T", "status": "X" * 11})
    assert errors["account"] == "Account must be less than 30 characters"
    assert errors["status"] == "Status must be less than 10 characters"


def test_bid_form_parses_datetime_local():
    form = BidListForm.from_form({"account": "A", "type": "T", "bid_list_date": "2024-01-15T10:30"})
    assert form.bid_list_date == datetime(2024, 1, 15, 10, 30)

    errors = _errors(BidListForm, {"account": "A", "type": "T", "bid_list_date": "yesterday"})
    assert errors["bid_list_date"] == "Bid list date must be a valid date and time"


# ---- curve point ----------------------------------------------------------

def test_curve_point_form_required():
    errors = _errors(CurvePointForm, {})
    assert errors == {
        "curve_id": "Curve ID is mandatory",
        "term": "Term is mandatory",
        "value": "Value is mandatory",
    }


@pytest.mark.parametrize("field, raw, message", [
    ("curve_id", "0", "Curve ID must be positive"),
    ("curve_id", "1.5", "Curve ID must be a whole number"),
    ("term", "-0.5", "Term must be positive or zero"),
    ("value", "1.23456", "Value must be a valid number with max 4 decimal places"),
])
def test_curve_point_form_checks(field, raw, message):
    data = {"curve_id": "1", "term": "1", "value": "1", field: raw}
    assert _errors(CurvePointForm, data)[field] == message


def test_curve_point_form_valid():
    form = CurvePointForm.from_form({"curve_id": "3", "term": "0", "value": "-2.5"})
    assert (form.curve_id, form.term, form.value, form.as_of_date) == (3, 0.0, -2.5, None)


# ---- rating ---------------------------------------------------------------

def test_rating_form_patterns():
    errors = _errors(RatingForm, {"moodys_rating": "AAA", "sand_p_rating": "Aaa", "fitch_rating": "BBB-"})
    assert errors["moodys_rating"].startswith("Moody's rating must follow standard format")
    assert errors["sand_p_rating"].startswith("S&P rating must follow standard format")
    assert "fitch_rating" not in errors


def test_rating_form_order_number():
    assert _errors(RatingForm, {"moodys_rating": "Aaa", "order_number": "0"}) == {
        "order_number": "Order number must be positive",
    }
    assert RatingForm.from_form({"moodys_rating": "Aaa"}).order_number is None


# ---- trade ----------------------------------------------------------------

def test_trade_form_messages():
    errors = _errors(TradeForm, {"buy_quantity": "0", "buy_price": "1.00001"})
    assert errors["account"] == "Account is required"
    assert errors["type"] == "Type is required"
    assert errors["buy_quantity"] == "Buy quantity must be positive"
    assert errors["buy_price"] == "Buy price must be a valid number with max 4 decimal places"


def test_trade_form_valid():
    form = TradeForm.from_form({"account": "acc1", "type": "spot", "sell_quantity": "5",
                                "sell_price": "10.1234", "trade_date": "2024-03-01T09:00"})
    assert form.account == "acc1"
    assert form.sell_price == 10.1234
    assert form.trade_date == datetime(2024, 3, 1, 9, 0)


def test_trade_form_converts_offset_dates_to_naive_utc():
    form = TradeForm.from_form({"account": "ACC1", "type": "SPOT",
                                "trade_date": "2024-03-01T11:00:00+02:00"})
    assert form.trade_date == datetime(2024, 3, 1, 9, 0)
    assert form.trade_date.tzinfo is None


# ---- rule name ------------------------------------------------------------

def test_rule_name_form_reads_json_field():
    form = RuleNameForm.from_form({"name": "r1", "json": '{"a": 1}'})
    assert form.json_config == '{"a": 1}'


def test_rule_name_form_errors():
    errors = _errors(RuleNameForm, {"name": "_bad", "json": "x" * 126, "template": "t" * 513})
    assert errors["name"].startswith("Rule name must start with alphanumeric character")
    assert errors["json"] == "JSON configuration must be less than 125 characters"
    assert errors["template"] == "Template must be less than 512 characters"

    assert _errors(RuleNameForm, {"name": ""}) == {"name": "Rule name is required"}


# ---- user -----------------------------------------------------------------

VALID_USER = {"username": "new_user", "password": "Secret@123", "fullname": "Jean-Luc O'Neil", "role": "USER"}


def test_user_form_valid():
    form = UserForm.from_form(VALID_USER)
    assert form.role == "USER"


@pytest.mark.parametrize("field, raw, fragment", [
    ("username", "ab", "Username must be at least 3 characters"),
    ("username", "bad name", "Username may only contain"),
    ("password", "password", "Password must contain at least 8 characters"),
    ("password", "Sh@1", "Password must contain at least 8 characters"),
    ("fullname", "J0hn", "Full name may only contain"),
    ("role", "ROOT", "Role must be one of"),
])
def test_user_form_rejects(field, raw, fragment):
    errors = _errors(UserForm, {**VALID_USER, field: raw})
    assert fragment in errors[field]
