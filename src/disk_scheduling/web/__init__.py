"""JSON web API for the disk scheduler.

This package provides a Flask application that exposes the scheduling
policies over HTTP.  It is an **optional** extra — install with::

    pip install disk-scheduling[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``GET /api/policies`` — the names of the available policies.
- ``POST /api/schedule`` — visit orders and distances as JSON.
"""
