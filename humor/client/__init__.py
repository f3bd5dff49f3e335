"""Client-side access to the caption voting API."""

from .api import HumorApiClient
from .error import ApiRequestError, ClientError
from .reconciler import VoteReconciler

__all__ = ["ApiRequestError", "ClientError", "HumorApiClient", "VoteReconciler"]
