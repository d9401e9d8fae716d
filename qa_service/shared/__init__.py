"""
Shared module package.

Contains cross-cutting concerns used by the qa context:
- Error handling and mapping
- CORS policy, security headers and rate limiting
- Logging configuration
"""
