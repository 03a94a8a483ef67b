"""
Settings Model

Contains the Settings model for application-wide option storage.
"""

from .base import db


class Settings(db.Model):
    """Key-value storage for application options.

    Values are JSON so a single key can hold a record such as
    ``{'token': 'abc123'}``.
    """
    __tablename__ = 'settings'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(64), unique=True, nullable=False, index=True)
    value = db.Column(db.JSON)

    def __repr__(self):
        return f'<Settings {self.key}>'
