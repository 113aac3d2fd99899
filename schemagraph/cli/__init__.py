"""CLI package for schemagraph tools."""

__all__ = ["export"]
