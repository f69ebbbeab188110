"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: invoice storage backends and
the caching layer placed in front of them.
"""
