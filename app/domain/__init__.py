"""
Domain layer package.

Contains pure business logic: entities, outcome messages, domain
services, errors and port interfaces. No framework imports, no IO.
"""
