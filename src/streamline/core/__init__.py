"""
Core idioms, mathematical primitives, and domain models.

This package contains the building blocks that are independent
of external systems (HTTP APIs, configuration files, etc.).
"""
