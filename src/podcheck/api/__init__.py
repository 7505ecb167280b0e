"""REST API for podcheck."""
