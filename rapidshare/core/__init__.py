"""Core modules of the rapidshare client."""
