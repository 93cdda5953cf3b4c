"""
Room Booking Backend — Middleware Package
===========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID stored in a ContextVar for every log line
    2. Logging: method, path, status and duration of each request
"""
