"""Query builder, data models, sync types and service clients for a headless content management API."""

__version__ = "0.5.2"

__all__ = ["models", "query", "services", "sync"]