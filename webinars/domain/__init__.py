"""
Domain layer - Webinar records and the rules around them.

This layer contains:
- Value objects (immutable, self-validating identifiers)
- Domain entities (Webinar, User)
- Domain errors

No dependencies on infrastructure or frameworks.
"""
