"""
Data models for reviewstats.

- review: record type and field accessors
- report: grouped metrics and report tables
"""
