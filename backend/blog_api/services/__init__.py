"""
Business logic services package.

WHY: Services contain business logic separated from API routes and data access,
following the three-layer architecture (API → Service → DAO). The rules
themselves live in services.validation; the per-entity services persist
and log what it decides.
"""
