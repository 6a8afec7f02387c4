"""
Top‑level package for the Blog API Gateway.

The HTTP application lives in the ``app`` subpackage; ``client``
provides a small ``requests``‑based client for the same API.
"""

__all__ = []
