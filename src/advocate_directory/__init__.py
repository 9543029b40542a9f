"""
Advocate Directory - searchable, sortable directory of advocates.

Subpackages:
- advocate_directory.core: column registry, query builder, ORM, errors, logging
- advocate_directory.ops: listing and seed operations
- advocate_directory.api: FastAPI transport (``/advocates``, ``/seed``)
- advocate_directory.client: debounced search controller and renderers
- advocate_directory.cli: ``advocates`` command-line entry point
"""

__version__ = "0.1.0"
