"""
Database Base Module

The shared SQLAlchemy instance. Kept apart from app.py so models and
services can import it without a circular import; app.py binds it with
db.init_app(app).
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
