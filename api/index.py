"""
Vercel Python Function entrypoint.

Vercel detects an ASGI app via a module-level variable named `app`, and also
accepts one named `handler`. Both names refer to the FastAPI app defined in
`backend/app.py`.
"""

from backend.app import app

handler = app

__all__ = ["app", "handler"]
