"""
Database Base Module

Holds the SQLAlchemy and Migrate extension instances. They are bound to the
Flask app in create_app(), kept here to avoid circular imports.
"""

from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
migrate = Migrate()
