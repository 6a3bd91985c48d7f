"""
Geocoding Module
--------------
Handles reverse geocoding operations to convert geographic coordinates to human-readable addresses.
Uses OpenStreetMap's Nominatim API with a fixed delay between requests to respect its usage policy.
"""
