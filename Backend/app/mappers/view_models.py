# Backend/app/mappers/view_models.py
"""
Entity <-> display projections.

Views are frozen dataclasses holding display-ready strings, built fresh per
request. Form data is the raw string mapping used to pre-fill an HTML form;
to_entity goes the other way, from a validated form schema to an unsaved
model instance.
"""

from dataclasses import dataclass
from datetime import datetime

from Backend.app.models import BidList, CurvePoint, Rating, RuleName, Trade, User
from Backend.app.utils.rating_scales import is_investment_grade

NOT_AVAILABLE = "N/A"
DATE_FORMAT = "%Y-%m-%d %H:%M"
# matches <input type="datetime-local">
FORM_DATE_FORMAT = "%Y-%m-%dT%H:%M"


# ---- formatting helpers ----------------------------------------------
def fmt_number(value, places):
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{places}f}"


def fmt_date(value):
    if value is None:
        return NOT_AVAILABLE
    return value.strftime(DATE_FORMAT)


def fmt_text(value):
    if value is None or str(value).strip() == '':
        return NOT_AVAILABLE
    return str(value)


def _raw(value):
    """Form-input representation of a stored value."""
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.strftime(FORM_DATE_FORMAT)
    return str(value)


def _present(value):
    return value is not None and str(value).strip() != ''


# ---- view models -----------------------------------------------------
@dataclass(frozen=True)
class BidListView:
    id: int
    account: str
    type: str
    bid_quantity: str
    ask_quantity: str
    bid: str
    ask: str
    status: str
    trader: str
    book: str
    security: str
    bid_list_date: str
    creation_date: str
    revision_date: str


@dataclass(frozen=True)
class CurvePointView:
    id: int
    curve_id: str
    as_of_date: str
    term: str
    value: str
    creation_date: str


@dataclass(frozen=True)
class RatingView:
    id: int
    moodys_rating: str
    sand_p_rating: str
    fitch_rating: str
    order_number: str
    investment_grade: bool

    @property
    def grade_label(self):
        return "Investment" if self.investment_grade else "Speculative"


@dataclass(frozen=True)
class TradeView:
    id: int
    account: str
    type: str
    buy_quantity: str
    sell_quantity: str
    buy_price: str
    sell_price: str
    trade_date: str
    security: str
    status: str
    side: str
    trader: str
    summary: str


@dataclass(frozen=True)
class RuleNameView:
    id: int
    name: str
    description: str
    json: str
    template: str
    sql_str: str
    sql_part: str
    complexity: str
    summary: str


@dataclass(frozen=True)
class UserView:
    id: int
    username: str
    fullname: str
    role: str


# ---- derived display fields ------------------------------------------
def trade_summary(trade):
    parts = [f"Trade: {trade.account or 'Unknown'} - {trade.type or 'Unknown'}"]
    for leg in ('buy', 'sell'):
        quantity = getattr(trade, f'{leg}_quantity')
        price = getattr(trade, f'{leg}_price')
        if quantity is not None and quantity > 0:
            chunk = f" [{leg.upper()}: {quantity}"
            if price is not None:
                chunk += f" @ {price}"
            parts.append(chunk + "]")
    if _present(trade.security):
        parts.append(f" ({trade.security})")
    return "".join(parts)


COMPLEXITY_LEVELS = ("BASIC", "INTERMEDIATE", "ADVANCED", "EXPERT")


def rule_complexity(rule):
    """One point each for a JSON config, a template and any SQL component."""
    score = sum((
        _present(rule.json),
        _present(rule.template),
        _present(rule.sql_str) or _present(rule.sql_part),
    ))
    return COMPLEXITY_LEVELS[score]


def rule_summary(rule):
    summary = f"Rule: {rule.name or 'Unnamed'}"
    if _present(rule.description):
        summary += f" - {rule.description}"
    return summary + f" [{rule_complexity(rule)}]"


# ---- mappers ---------------------------------------------------------
class EntityMapper:
    """
    Projection rules for one entity type.

    Subclasses set `model` and `form_fields` (form attribute names, which
    are also the model column names unless `field_aliases` says otherwise)
    and implement to_view().
    """
    model = None
    form_fields = ()
    # model column -> form schema attribute
    field_aliases = {}

    def to_view(self, entity):
        raise NotImplementedError

    def to_views(self, entities):
        if entities is None:
            return []
        return [self.to_view(e) for e in entities]

    def to_form_data(self, entity):
        if entity is None:
            return {}
        return {field: _raw(getattr(entity, field)) for field in self.form_fields}

    def to_entity(self, form, entity_id=None):
        values = {
            field: getattr(form, self.field_aliases.get(field, field))
            for field in self.form_fields
        }
        entity = self.model(**values)
        entity.id = entity_id
        return entity


class BidListMapper(EntityMapper):
    model = BidList
    form_fields = (
        'account', 'type', 'bid_quantity', 'ask_quantity', 'bid', 'ask',
        'benchmark', 'commentary', 'security', 'status', 'trader', 'book',
        'creation_name', 'revision_name', 'deal_name', 'deal_type',
        'source_list_id', 'side', 'bid_list_date',
    )

    def to_view(self, bid):
        return BidListView(
            id=bid.id,
            account=fmt_text(bid.account),
            type=fmt_text(bid.type),
            bid_quantity=fmt_number(bid.bid_quantity, 2),
            ask_quantity=fmt_number(bid.ask_quantity, 2),
            bid=fmt_number(bid.bid, 2),
            ask=fmt_number(bid.ask, 2),
            status=fmt_text(bid.status),
            trader=fmt_text(bid.trader),
            book=fmt_text(bid.book),
            security=fmt_text(bid.security),
            bid_list_date=fmt_date(bid.bid_list_date),
            creation_date=fmt_date(bid.creation_date),
            revision_date=fmt_date(bid.revision_date),
        )


class CurvePointMapper(EntityMapper):
    model = CurvePoint
    form_fields = ('curve_id', 'as_of_date', 'term', 'value')

    def to_view(self, point):
        return CurvePointView(
            id=point.id,
            curve_id=fmt_text(point.curve_id),
            as_of_date=fmt_date(point.as_of_date),
            term=fmt_number(point.term, 4),
            value=fmt_number(point.value, 4),
            creation_date=fmt_date(point.creation_date),
        )


class RatingMapper(EntityMapper):
    model = Rating
    form_fields = ('moodys_rating', 'sand_p_rating', 'fitch_rating', 'order_number')

    def to_view(self, rating):
        return RatingView(
            id=rating.id,
            moodys_rating=fmt_text(rating.moodys_rating),
            sand_p_rating=fmt_text(rating.sand_p_rating),
            fitch_rating=fmt_text(rating.fitch_rating),
            order_number=fmt_text(rating.order_number),
            investment_grade=is_investment_grade(
                rating.moodys_rating, rating.sand_p_rating, rating.fitch_rating),
        )


class TradeMapper(EntityMapper):
    model = Trade
    form_fields = (
        'account', 'type', 'buy_quantity', 'sell_quantity', 'buy_price',
        'sell_price', 'trade_date', 'benchmark', 'security', 'status',
        'trader', 'book', 'creation_name', 'revision_name', 'deal_name',
        'deal_type', 'source_list_id', 'side',
    )

    def to_view(self, trade):
        return TradeView(
            id=trade.id,
            account=fmt_text(trade.account),
            type=fmt_text(trade.type),
            buy_quantity=fmt_number(trade.buy_quantity, 2),
            sell_quantity=fmt_number(trade.sell_quantity, 2),
            buy_price=fmt_number(trade.buy_price, 4),
            sell_price=fmt_number(trade.sell_price, 4),
            trade_date=fmt_date(trade.trade_date),
            security=fmt_text(trade.security),
            status=fmt_text(trade.status),
            side=fmt_text(trade.side),
            trader=fmt_text(trade.trader),
            summary=trade_summary(trade),
        )


class RuleNameMapper(EntityMapper):
    model = RuleName
    form_fields = ('name', 'description', 'json', 'template', 'sql_str', 'sql_part')
    field_aliases = {'json': 'json_config'}

    def to_view(self, rule):
        return RuleNameView(
            id=rule.id,
            name=fmt_text(rule.name),
            description=fmt_text(rule.description),
            json=fmt_text(rule.json),
            template=fmt_text(rule.template),
            sql_str=fmt_text(rule.sql_str),
            sql_part=fmt_text(rule.sql_part),
            complexity=rule_complexity(rule),
            summary=rule_summary(rule),
        )


class UserMapper(EntityMapper):
    model = User
    form_fields = ('username', 'password', 'fullname', 'role')

    def to_view(self, user):
        return UserView(
            id=user.id,
            username=user.username,
            fullname=fmt_text(user.fullname),
            role=user.role,
        )

    def to_form_data(self, user):
        data = super().to_form_data(user)
        # the stored hash is never sent back to the browser
        data.pop('password', None)
        return data


bid_list_mapper    = BidListMapper()
curve_point_mapper = CurvePointMapper()
rating_mapper      = RatingMapper()
trade_mapper       = TradeMapper()
rule_name_mapper   = RuleNameMapper()
user_mapper        = UserMapper()
