"""
Review Module
-----------
Renders the static HTML page used to check geocoded rows by hand.
Review decisions are recorded by editing the output table, never read back here.
"""
