# Middleware package init
"""
PetDemo: Middleware Package
===========================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [CORS] → [GZip] → Route Handler

    Request ID runs first so the access log line and any error logged by an
    exception handler carry the same correlation id.
"""
