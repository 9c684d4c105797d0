"""
Service layer abstraction.

Services encapsulate business logic and are constructed with the
stores they operate on, so API handlers never touch storage directly.
"""
