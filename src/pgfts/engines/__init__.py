"""Search engine layer — Pluggable full-text search drivers.

Built-in engines:
  - pgsql: PostgreSQL native full-text search (tsvector / tsquery)

Implement ``SearchEngine`` to plug in another backend.
"""
