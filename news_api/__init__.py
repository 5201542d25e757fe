"""
REST API over a Postgres news database: topics, articles, comments, users.
"""

__version__ = "1.0.0"
