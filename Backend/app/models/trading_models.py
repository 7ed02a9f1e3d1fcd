from datetime import datetime, timezone
from Backend.app import db


def _iso(value):
    return value.isoformat() if value else None


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


# ---------------------------
# BidList: a bid/ask offer on an account. Only account and type are
#          mandatory; creation_date / revision_date are audit stamps set
#          by the service layer.
# ---------------------------
class BidList(db.Model):
    __tablename__ = 'bid_list'

    id             = db.Column(db.Integer, primary_key=True)
    account        = db.Column(db.String(30), nullable=False)
    type           = db.Column(db.String(30), nullable=False)
    bid_quantity   = db.Column(db.Float)
    ask_quantity   = db.Column(db.Float)
    bid            = db.Column(db.Float)
    ask            = db.Column(db.Float)
    benchmark      = db.Column(db.String(125))
    bid_list_date  = db.Column(db.DateTime)
    commentary     = db.Column(db.String(125))
    security       = db.Column(db.String(125))
    status         = db.Column(db.String(10))
    trader         = db.Column(db.String(125))
    book           = db.Column(db.String(125))
    creation_name  = db.Column(db.String(125))
    creation_date  = db.Column(db.DateTime)
    revision_name  = db.Column(db.String(125))
    revision_date  = db.Column(db.DateTime)
    deal_name      = db.Column(db.String(125))
    deal_type      = db.Column(db.String(125))
    source_list_id = db.Column(db.String(125))
    side           = db.Column(db.String(125))

    @classmethod
    def of(cls, account, type, bid_quantity=None):
        """Quick constructor without id or audit fields."""
        return cls(account=account, type=type, bid_quantity=bid_quantity)

    def __repr__(self):
        return f'<BidList id={self.id} account={self.account} type={self.type}>'

    def to_dict(self):
        return {
            'id':             self.id,
            'account':        self.account,
            'type':           self.type,
            'bid_quantity':   self.bid_quantity,
            'ask_quantity':   self.ask_quantity,
            'bid':            self.bid,
            'ask':            self.ask,
            'benchmark':      self.benchmark,
            'bid_list_date':  _iso(self.bid_list_date),
            'commentary':     self.commentary,
            'security':       self.security,
            'status':         self.status,
            'trader':         self.trader,
            'book':           self.book,
            'creation_name':  self.creation_name,
            'creation_date':  _iso(self.creation_date),
            'revision_name':  self.revision_name,
            'revision_date':  _iso(self.revision_date),
            'deal_name':      self.deal_name,
            'deal_type':      self.deal_type,
            'source_list_id': self.source_list_id,
            'side':           self.side,
        }


# ---------------------------
# Trade: an executed or pending buy and/or sell on an account.
# ---------------------------
class Trade(db.Model):
    __tablename__ = 'trade'

    id             = db.Column(db.Integer, primary_key=True)
    account        = db.Column(db.String(30), nullable=False, index=True)
    type           = db.Column(db.String(30), nullable=False)
    buy_quantity   = db.Column(db.Float)
    sell_quantity  = db.Column(db.Float)
    buy_price      = db.Column(db.Float)
    sell_price     = db.Column(db.Float)
    trade_date     = db.Column(db.DateTime, index=True)
    benchmark      = db.Column(db.String(125))
    security       = db.Column(db.String(125))
    status         = db.Column(db.String(10))
    trader         = db.Column(db.String(125))
    book           = db.Column(db.String(125))
    creation_name  = db.Column(db.String(125))
    creation_date  = db.Column(db.DateTime)
    revision_name  = db.Column(db.String(125))
    revision_date  = db.Column(db.DateTime)
    deal_name      = db.Column(db.String(125))
    deal_type      = db.Column(db.String(125))
    source_list_id = db.Column(db.String(125))
    side           = db.Column(db.String(125))

    @classmethod
    def of(cls, account, type, buy_quantity=None, sell_quantity=None):
        return cls(
            account=account,
            type=type,
            buy_quantity=buy_quantity,
            sell_quantity=sell_quantity,
        )

    @property
    def total_buy_value(self):
        if self.buy_quantity is not None and self.buy_price is not None:
            return self.buy_quantity * self.buy_price
        return None

    @property
    def total_sell_value(self):
        if self.sell_quantity is not None and self.sell_price is not None:
            return self.sell_quantity * self.sell_price
        return None

    def __repr__(self):
        return f'<Trade id={self.id} account={self.account} type={self.type}>'

    def to_dict(self):
        return {
            'id':             self.id,
            'account':        self.account,
            'type':           self.type,
            'buy_quantity':   self.buy_quantity,
            'sell_quantity':  self.sell_quantity,
            'buy_price':      self.buy_price,
            'sell_price':     self.sell_price,
            'trade_date':     _iso(self.trade_date),
            'benchmark':      self.benchmark,
            'security':       self.security,
            'status':         self.status,
            'trader':         self.trader,
            'book':           self.book,
            'creation_name':  self.creation_name,
            'creation_date':  _iso(self.creation_date),
            'revision_name':  self.revision_name,
            'revision_date':  _iso(self.revision_date),
            'deal_name':      self.deal_name,
            'deal_type':      self.deal_type,
            'source_list_id': self.source_list_id,
            'side':           self.side,
        }
