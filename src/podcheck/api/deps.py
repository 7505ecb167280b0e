"""Dependency injection for FastAPI: ManifestChecker singleton."""

from __future__ import annotations

from podcheck.service.checker import ManifestChecker

_checker: ManifestChecker | None = None


def init_checker(checker: ManifestChecker) -> None:
    """Set the global ManifestChecker (called at app startup)."""
    global _checker  # noqa: PLW0603
    _checker = checker


def get_checker() -> ManifestChecker:
    """FastAPI ``Depends`` provider for ManifestChecker."""
    if _checker is None:
        raise RuntimeError("ManifestChecker not initialised; call init_checker() first")
    return _checker


def reset_checker() -> None:
    """Clear the global ManifestChecker (for tests)."""
    global _checker  # noqa: PLW0603
    _checker = None
