"""
HTTP boundary.

``router`` aggregates the domain routers; ``deps`` exposes the
services stored on the application state as FastAPI dependencies.
Handlers translate nothing themselves: errors raised by services are
rendered by the handlers in ``core.errors``.
"""
