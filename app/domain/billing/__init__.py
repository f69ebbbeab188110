"""
Billing bounded context, domain layer.

This module contains all domain logic for the billing context:
- Invoice and payment entities
- Payment application rules and outcome messages
- Repository port for invoice storage
"""
