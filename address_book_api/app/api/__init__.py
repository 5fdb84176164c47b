"""
HTTP layer of the application.

``router`` aggregates the endpoint modules; ``main`` mounts it under
the ``/api`` prefix.
"""
