"""RapidShare API client."""
from .api_client import APIClient

__all__ = ['APIClient']
