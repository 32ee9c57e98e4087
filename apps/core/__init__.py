"""
Core app - Shared plumbing for the service.

Provides:
- Health endpoint (GET /) reporting process uptime
- Request logging middleware
- `serve` management command bound to the configured PORT
"""
