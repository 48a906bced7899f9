"""Namespace reserved for MPD support; it holds no modules."""

__all__: list[str] = []