"""SchoolHub notices API.

Layered as ``domain`` (entities and errors), ``application`` (use cases),
``infrastructure`` (persistence, security, logging) and ``interfaces``
(FastAPI routes and schemas).
"""
