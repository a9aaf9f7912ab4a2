"""
tickoff: a per-user todo list.

Components:
- todos/: data model, SQLite store and the owner-scoped todo operations
- server/: FastAPI app exposing the operations over HTTP
- auth/: bearer-token session lookup
- client/: HTTP client + view-model (filtered views, counts, refetch-on-mutation)
- cli/, connectors/: entry points and the console front end
"""

__version__ = "1.0.0"
