"""Tenant identity service.

Multi-tenant identity backend: users, profiles and tenants guarded by an
explicit, data-driven permission model, with domain events broadcast to
independent subscribers after every committed change.
"""

__version__ = "0.1.0"
