"""Integration tests.

Purpose
- Exercise real interactions with the database through SQLAlchemy.

Guidelines
- Use the rolled-back `session` fixture so tests never see each other's rows.
- Minimize mocking; run the real statements against SQLite.
- Mark as 'integration' and keep them slower but reliable.
"""
