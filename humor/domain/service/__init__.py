"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .caption_example_service import CaptionExampleService
from .caption_service import CaptionService
from .jwt_service import JWTService
from .profile_service import ProfileService, profile_id_for
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "CaptionExampleService",
    "CaptionService",
    "JWTService",
    "OAuthClient",
    "ProfileService",
    "Service",
    "VoteService",
    "profile_id_for",
]
