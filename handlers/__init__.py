"""
handlers/ - Presentation Layer
================================
HTTP handlers. Each handler receives a parsed request from FastAPI,
delegates to the appropriate Service, and returns the JSON envelope.
No business logic lives here.
"""
