"""Friggsys - user account management backend.

Layers:
- domain: the User aggregate, its value objects and the error taxonomy
- application: use cases (commands/queries), DTOs and ports
- infrastructure: bcrypt password encoder and SQLAlchemy persistence
"""
