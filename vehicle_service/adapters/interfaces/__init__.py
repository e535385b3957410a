"""
Interfaces package for the Vehicle Adaptor Service.

Abstract contracts the service facade depends on.
"""

from .vendor_client import VehicleVendorClient

__all__ = [
    'VehicleVendorClient',
]
