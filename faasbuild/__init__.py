"""Helpers for function build arguments, file copying, templates, deployment checks and descriptions."""

__version__ = "0.1.0"