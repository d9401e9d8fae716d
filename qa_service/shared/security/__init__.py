"""
Security middleware package.

HTTP hardening headers, CORS policy enforcement and rate limiting.
"""
