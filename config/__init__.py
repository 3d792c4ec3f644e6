"""Configuration for reviewstats."""
