"""Normalization package.

Turns a raw personnummer string into its canonical 12-digit form
(``CCYYMMDDNNNC``).  The normalizer raises ``FormatError`` on any input
that does not have one of the two accepted shapes; callers that need a
boolean answer collapse that error themselves.
"""
