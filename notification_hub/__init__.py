"""Notification fan-out and delivery tracking service.

The package is split in the usual layers: ``domain`` holds plain entities,
``infrastructure`` the SQLAlchemy models and repositories, ``application``
the use cases and ``interfaces`` the FastAPI routers.
"""
