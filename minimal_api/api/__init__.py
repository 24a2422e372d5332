"""API Layer — FastAPI routes, the resource endpoint registrar and error handlers."""
