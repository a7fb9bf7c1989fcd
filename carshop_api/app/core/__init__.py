"""Core infrastructure: settings, logging, errors, fixtures and access control."""
