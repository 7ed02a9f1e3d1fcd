# Backend/app/models/reference_models.py
# ---------------------------
# Reference data shared across desks: curve points, credit ratings and
# business rules.

from Backend.app import db
from Backend.app.models.trading_models import _iso


# CurvePoint: one (term, value) node of a curve. Points sharing curve_id
#             make up a term structure; there is no parent Curve row.
#             as_of_date is the financial validity date, creation_date the
#             audit timestamp written once at insert.
class CurvePoint(db.Model):
    __tablename__ = 'curve_point'

    id            = db.Column(db.Integer, primary_key=True)
    curve_id      = db.Column(db.Integer, nullable=False, index=True)
    as_of_date    = db.Column(db.DateTime)
    term          = db.Column(db.Float, nullable=False)
    value         = db.Column(db.Float, nullable=False)
    creation_date = db.Column(db.DateTime)

    @classmethod
    def of(cls, curve_id, term, value):
        return cls(curve_id=curve_id, term=term, value=value)

    def __repr__(self):
        return f'<CurvePoint id={self.id} curve={self.curve_id} term={self.term}>'

    def to_dict(self):
        return {
            'id':            self.id,
            'curve_id':      self.curve_id,
            'as_of_date':    _iso(self.as_of_date),
            'term':          self.term,
            'value':         self.value,
            'creation_date': _iso(self.creation_date),
        }


# Rating: the three agency labels for one credit quality bucket.
#         order_number ranks buckets, lower is better.
class Rating(db.Model):
    __tablename__ = 'rating'

    id            = db.Column(db.Integer, primary_key=True)
    moodys_rating = db.Column(db.String(125))
    sand_p_rating = db.Column(db.String(125))
    fitch_rating  = db.Column(db.String(125))
    order_number  = db.Column(db.Integer, unique=True)

    @classmethod
    def of(cls, moodys_rating, sand_p_rating, fitch_rating, order_number=None):
        return cls(
            moodys_rating=moodys_rating,
            sand_p_rating=sand_p_rating,
            fitch_rating=fitch_rating,
            order_number=order_number,
        )

    def __repr__(self):
        return (
            f'<Rating id={self.id} '
            f'{self.moodys_rating}/{self.sand_p_rating}/{self.fitch_rating} '
            f'order={self.order_number}>'
        )

    def to_dict(self):
        return {
            'id':            self.id,
            'moodys_rating': self.moodys_rating,
            'sand_p_rating': self.sand_p_rating,
            'fitch_rating':  self.fitch_rating,
            'order_number':  self.order_number,
        }


# RuleName: a named business rule with optional JSON config, template
#           and SQL fragments.
class RuleName(db.Model):
    __tablename__ = 'rule_name'

    id          = db.Column(db.Integer, primary_key=True)
    name        = db.Column(db.String(125), nullable=False, unique=True)
    description = db.Column(db.String(125))
    json        = db.Column(db.String(125))
    template    = db.Column(db.String(512))
    sql_str     = db.Column(db.String(125))
    sql_part    = db.Column(db.String(125))

    @classmethod
    def of(cls, name, description, json=None, template=None):
        return cls(name=name, description=description, json=json, template=template)

    def __repr__(self):
        return f'<RuleName id={self.id} name={self.name}>'

    def to_dict(self):
        return {
            'id':          self.id,
            'name':        self.name,
            'description': self.description,
            'json':        self.json,
            'template':    self.template,
            'sql_str':     self.sql_str,
            'sql_part':    self.sql_part,
        }
