"""
Service layer abstraction.

Services encapsulate the use cases of a domain and talk to
repositories, so API handlers never touch the database directly.
"""
