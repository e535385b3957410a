"""
Vehicle Adaptor Service - REST layer over the MM vehicle API.

This package exposes vehicle info, door locks, fuel, battery and engine
start/stop as a small uniform HTTP API, normalizing the vendor's tagged-value
payloads and classifying its failures.
"""

__version__ = "0.1.0"
