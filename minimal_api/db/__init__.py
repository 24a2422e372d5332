"""Database Metadata — declarative Base shared by models and the session manager."""
