# Middleware package init
"""
Mobile Bazar Backend — Middleware Package
===========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [Security Headers]
            → [CORS] → Route Handler

    1. Rate Limit first: abusive clients are rejected before any work
    2. Request ID: correlation id for logs and error envelopes
    3. Logging: method, path, status and duration with the request id
    4. Security Headers: hardening headers on every response
    5. CORS: Starlette's CORSMiddleware (handles preflight)
"""
