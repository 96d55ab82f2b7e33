"""
Fauna API: Middleware Package
==============================

Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

The request ID is assigned first so the access log line can carry it; the
response passes back through the same chain in reverse.
"""
