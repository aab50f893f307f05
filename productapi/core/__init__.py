"""
Core utilities shared across the product API.

Configuration (environment-backed Settings) and logging setup live here so
routers and repositories never read os.environ directly.
"""
