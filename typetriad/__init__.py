"""ABOUTME: Type effectiveness model and defensive type combination search.
ABOUTME: Exposes the type registry and the effectiveness engine."""

__version__ = "0.1.0"
