# Backend/app/routes/trades.py

from flask import request

from Backend.app.mappers import trade_mapper
from Backend.app.routes.crud import CrudViews
from Backend.app.schemas import TradeForm


class TradeViews(CrudViews):
    """`/trade/list?account=<ACCOUNT>` narrows the list and shows the net position."""

    def __init__(self, service):
        super().__init__('trade', service, trade_mapper, TradeForm, label="Trade")

    def _account(self):
        return request.args.get('account', '').strip().upper()

    def load_records(self):
        account = self._account()
        if account:
            return self.service.find_by_account(account)
        return self.service.find_all()

    def list_context(self):
        account = self._account()
        net = self.service.total_value_by_account(account) if account else None
        return {
            'account': account,
            'net_value': f"{net:,.2f}" if net is not None else None,
        }


def create_trade_bp(service):
    return TradeViews(service).blueprint
