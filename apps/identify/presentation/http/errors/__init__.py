"""HTTP error handlers."""
