"""
API package.

``router`` aggregates the endpoint modules; ``responses`` and
``dependencies`` hold the helpers they share.
"""
