"""
Service layer abstraction.

Services are constructed with the repository they forward to, which
keeps API handlers independent of the concrete storage backend.
"""
