"""Top-level package for Django configuration.

This package exposes configuration for the parking reservation service.
It contains settings modules for different environments and entry points
for WSGI and ASGI.
"""
