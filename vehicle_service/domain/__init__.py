"""
Domain package for the Vehicle Adaptor Service.

This package contains the domain models, the operation result type and the
public response schemas. It has no knowledge of the vendor wire format.
"""
