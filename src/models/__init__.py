"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines the structure of an enriched table row: the untouched input columns plus the
geocoding and review fields appended to every row.
"""
