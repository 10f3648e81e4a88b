"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its persistence context explicitly, so API handlers never touch the
store directly.
"""
