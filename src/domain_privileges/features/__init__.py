"""Feature packages for domain-privileges.

- permissions/: catalogs, role resolution, privilege guard
- tenants/: tenant entities, store adapter, domain permission aggregation
- users/: user entities, store adapter, admin write paths
"""
