"""Shared utilities."""

from portal.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid"]
