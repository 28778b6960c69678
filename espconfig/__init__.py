"""Typed configuration items and a manager that saves them as one JSON file."""

__version__ = "0.1.0"
__all__ = ["items", "manager", "demo"]