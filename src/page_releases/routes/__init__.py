"""HTTP routes."""

from page_releases.routes import publish, releases, roles

__all__ = ["publish", "releases", "roles"]
