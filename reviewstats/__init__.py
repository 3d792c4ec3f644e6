"""
reviewstats - product review reports.

Turns a JSON-lines dump of product reviews into ranked CSV reports.
"""

__version__ = "1.0.0"
