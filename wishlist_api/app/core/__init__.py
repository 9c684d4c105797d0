"""Core infrastructure: configuration, security, logging, errors and database setup."""
