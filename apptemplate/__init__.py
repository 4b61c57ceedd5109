"""JSON web service template with environment configuration, SQLAlchemy database access and file logging."""

__version__ = "0.1.0"