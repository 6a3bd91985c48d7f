"""
Enrichment Module
---------------
Reads a coordinate table, reverse geocodes every row in order and writes the annotated table
together with its HTML review page.
"""
