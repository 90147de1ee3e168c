"""Core configuration, schemas and logging.

Contains:
- config.py: environment-driven `Settings` and the startup loader
- models_io.py: request/response schemas used across routers
- logging.py: process-wide logging setup
- errors.py: exception hierarchy shared by the storage engine and routers
- handlers.py: plain-text rendering of HTTP and validation errors
"""
