"""
SocialNet API
GraphQL backend for users, posts, comments and likes on MongoDB
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
