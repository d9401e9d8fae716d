"""
WSGI compatibility layer.

Wraps the ASGI FastAPI application for deployment on WSGI servers
such as Gunicorn or Waitress. Prefer ASGI deployment (``python -m
qa_service``) when possible: a WSGI worker serves one request at a
time, so the store's concurrency is not exercised there.
"""

from a2wsgi import ASGIMiddleware

from qa_service.main import create_app

app = create_app()

# Expose a WSGI-compatible app object for WSGI servers (gunicorn, waitress, etc.)
application = ASGIMiddleware(app)
