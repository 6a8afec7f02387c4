"""
Application package initializer.

The package is organised into layers: ``core`` (configuration,
logging, errors and locking primitives), ``schemas`` (pydantic request
and response models), ``repositories`` (in‑memory stores),
``services`` (thin business layer plus the startup seed loader) and
``api`` (FastAPI routers).  ``main.create_app`` wires them together.
"""
