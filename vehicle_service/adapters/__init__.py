"""
Adapters package for the Vehicle Adaptor Service.

This package contains components for integrating with the vendor API:
- The abstract vendor client contract
- The MM API implementation: HTTP client, envelope classifier and normalizers
"""

from . import interfaces
from .implementations.mm_api import MMApiClient

__all__ = [
    'interfaces',
    'MMApiClient',
]
