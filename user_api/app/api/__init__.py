"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and is included by
``main.create_app``.
"""
