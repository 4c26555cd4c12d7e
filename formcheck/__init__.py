"""formcheck: metadata-driven normalization and validation of form data.

Walks a record's declared fields, standardizes names, email addresses and
telephone numbers, and validates contact details against an external
verification web service.
"""

__version__ = "0.1.0"
