"""API routers: ``/advocates``, ``/seed`` and ``/health``."""
