"""
Version 1 of the API.

The same routes are served at the root, on the unprefixed paths
existing clients use, and under ``/api/v1``.
"""
