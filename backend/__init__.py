"""Backend web application served by the serverless entry point in api/index.py."""

__version__ = "0.1.0"
