"""Data models for package script detection."""

from __future__ import annotations

from .descriptor import PackageDescriptor

__all__ = [
    "PackageDescriptor",
]
