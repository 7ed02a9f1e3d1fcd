# Backend/app/services/trade_service.py

import logging
import re
from datetime import timedelta

from sqlalchemy import func

from Backend.app.exceptions import BusinessRuleError
from Backend.app.models.trading_models import Trade, utcnow
from Backend.app.services.base import CrudService

logger = logging.getLogger(__name__)

ACCOUNT_PATTERN = re.compile(r'^[A-Z0-9][A-Z0-9_\-]*$')
TYPE_PATTERN    = re.compile(r'^[A-Z][A-Z0-9_]*$')
KNOWN_STATUSES  = ('PENDING', 'EXECUTED', 'CANCELLED', 'FAILED', 'SETTLED')
MAX_LEG_VALUE   = 10_000_000.0

_UPPER_TEXT = ('account', 'type', 'status', 'side')
_PLAIN_TEXT = (
    'security', 'trader', 'benchmark', 'book', 'creation_name',
    'revision_name', 'deal_name', 'deal_type', 'source_list_id',
)


def _positive(value):
    return value is not None and value > 0


class TradeService(CrudService):
    model = Trade
    editable_fields = (
        'account', 'type', 'buy_quantity', 'sell_quantity', 'buy_price',
        'sell_price', 'trade_date', 'benchmark', 'security', 'status',
        'trader', 'book', 'revision_name', 'deal_name', 'deal_type',
        'source_list_id', 'side',
    )
    default_order = (Trade.trade_date.desc(), Trade.id.desc())

    def normalize(self, trade):
        for field in _UPPER_TEXT:
            value = getattr(trade, field)
            if value is not None:
                setattr(trade, field, value.strip().upper() or None)
        for field in _PLAIN_TEXT:
            value = getattr(trade, field)
            if value is not None:
                setattr(trade, field, value.strip() or None)

    def before_create(self, trade):
        self.normalize(trade)
        now = utcnow()
        if trade.creation_date is None:
            trade.creation_date = now
        if trade.trade_date is None:
            trade.trade_date = now

    def before_update(self, trade):
        self.normalize(trade)
        trade.revision_date = utcnow()

    def validate(self, trade):
        if not trade.account:
            raise BusinessRuleError("Account cannot be null or empty")
        if not ACCOUNT_PATTERN.match(trade.account):
            raise BusinessRuleError(
                "Account must start with alphanumeric character and contain only "
                "uppercase letters, digits, underscores, and hyphens"
            )
        if not trade.type:
            raise BusinessRuleError("Type cannot be null or empty")
        if not TYPE_PATTERN.match(trade.type):
            raise BusinessRuleError(
                "Type must start with a letter and contain only letters, digits, and underscores"
            )
        self._validate_amounts(trade)
        self._validate_dates(trade)
        self._validate_side(trade)

        if trade.status and trade.status not in KNOWN_STATUSES:
            logger.warning(f"Non-standard status '{trade.status}' used in trade {trade.id}")

    def _validate_amounts(self, trade):
        if not _positive(trade.buy_quantity) and not _positive(trade.sell_quantity):
            raise BusinessRuleError(
                "Trade must have at least one operation (buy or sell) with positive quantity"
            )
        for leg in ('buy', 'sell'):
            quantity = getattr(trade, f'{leg}_quantity')
            price = getattr(trade, f'{leg}_price')
            label = leg.capitalize()
            if quantity is not None:
                if quantity <= 0:
                    raise BusinessRuleError(f"{label} quantity must be positive")
                if not _positive(price):
                    raise BusinessRuleError(
                        f"{label} price must be positive when {leg} quantity is specified"
                    )
                if quantity * price > MAX_LEG_VALUE:
                    raise BusinessRuleError(
                        f"{label} trade value exceeds maximum allowed limit of {MAX_LEG_VALUE:,.0f}"
                    )
            elif price is not None:
                raise BusinessRuleError(f"{label} price cannot be specified without {leg} quantity")

    def _validate_dates(self, trade):
        now = utcnow()
        if trade.trade_date is not None and trade.trade_date > now + timedelta(days=1):
            raise BusinessRuleError("Trade date cannot be more than 1 day in the future")
        if (trade.creation_date is not None and trade.revision_date is not None
                and trade.revision_date < trade.creation_date):
            raise BusinessRuleError("Revision date cannot be before creation date")

    def _validate_side(self, trade):
        if trade.side == 'BUY' and not _positive(trade.buy_quantity):
            raise BusinessRuleError("Side is BUY but no buy operation is defined")
        if trade.side == 'SELL' and not _positive(trade.sell_quantity):
            raise BusinessRuleError("Side is SELL but no sell operation is defined")

    # ---- extra queries -----------------------------------------------
    def find_by_account(self, account):
        if not account or not account.strip():
            return []
        return (
            self.session.query(Trade)
            .filter_by(account=account.strip().upper())
            .order_by(*self.default_order)
            .all()
        )

    def total_value_by_account(self, account):
        """Net cash position of an account: total sell value minus total buy value."""
        if not account or not account.strip():
            return None
        account = account.strip().upper()
        buy = (
            self.session.query(func.sum(Trade.buy_quantity * Trade.buy_price))
            .filter(Trade.account == account)
            .scalar()
        )
        sell = (
            self.session.query(func.sum(Trade.sell_quantity * Trade.sell_price))
            .filter(Trade.account == account)
            .scalar()
        )
        return (sell or 0.0) - (buy or 0.0)
