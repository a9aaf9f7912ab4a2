"""
Todo subsystem.

Components:
- todo_models.py: data structures (Todo, TodoPatch, TodoFilter) and title validation
- todo_store.py: SQLite-backed, owner-scoped storage
- todo_api.py: the five operations used by the HTTP handlers
"""
