# Backend/app/models/user_models.py
# ---------------------------
# User: an account allowed through the login gate. `password` holds a
#       werkzeug hash, never the clear text.

from Backend.app import db

ROLES = ('USER', 'ADMIN')


class User(db.Model):
    __tablename__ = 'users'

    id       = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), nullable=False, unique=True)
    password = db.Column(db.String(255), nullable=False)
    fullname = db.Column(db.String(100), nullable=False)
    role     = db.Column(db.String(10), nullable=False, default='USER')

    @property
    def is_admin(self):
        return self.role == 'ADMIN'

    def __repr__(self):
        return f'<User {self.username} ({self.role})>'

    def to_dict(self):
        return {
            'id':       self.id,
            'username': self.username,
            'fullname': self.fullname,
            'role':     self.role,
        }
