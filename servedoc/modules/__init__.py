"""Feature modules of the documentation server."""
