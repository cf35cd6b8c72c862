"""
Service layer abstraction.

Services encapsulate the business logic of a domain and work on the
store they are given, which keeps API handlers thin.
"""
