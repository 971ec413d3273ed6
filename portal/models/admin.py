"""
Admin Model
"""

from flask_login import UserMixin
from portal.extensions import db


class Admin(UserMixin, db.Model):
    """Administrator account used to log in to the panel"""
    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80))
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    # Werkzeug salted hash, never plaintext
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())
    updated_at = db.Column(db.DateTime, default=db.func.current_timestamp(),
                           onupdate=db.func.current_timestamp())

    def to_profile(self):
        """Public profile; the password hash is left out."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
        }

    def __repr__(self):
        return f'<Admin {self.email}>'
