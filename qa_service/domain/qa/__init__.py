"""
QA bounded context, domain layer.

This module contains all domain logic for the qa context:
- Question and answer identity
- Pagination of question listings
- The store contract and its failure kinds
"""
