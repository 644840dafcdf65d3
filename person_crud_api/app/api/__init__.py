"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes all
domain‑specific endpoint routers; ``deps.py`` wires services to their
repositories for injection into the routes.
"""
