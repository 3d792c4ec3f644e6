"""
Utility modules for reviewstats.

Cross-cutting concerns:
- Style: flatten a record's style attributes for display
- Storage: write report tables to CSV
"""
