"""
Feature modules live under this package.

Each module owns its models, store and routes, and reuses the platform
primitives in app.crm (config, DB session, error handling).
"""
