"""Entry points that drive the services."""
