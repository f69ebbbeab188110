"""
Infrastructure adapters for the billing bounded context.

Each adapter implements a domain port (ABC) and connects
to a storage backend: process memory or a SQL database.
"""
