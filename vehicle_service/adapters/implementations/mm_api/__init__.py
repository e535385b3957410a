"""
MM API adapter.

Client, envelope classifier and data normalizers for the MM vehicle API.
"""

from .client import MMApiClient
from .classifier import ClassifiedResponse, ResponseOutcome, classify_response

__all__ = [
    'MMApiClient',
    'ClassifiedResponse',
    'ResponseOutcome',
    'classify_response',
]
