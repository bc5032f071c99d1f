"""Pipeguard - role-based access control for a CI/CD control plane."""

__version__ = "0.1.0"
