"""
Processing stages for reviewstats.

- Ingestion (RecordLoader)
- Aggregation (Aggregator + representative records)
- Ranking (Ranker)
- Filters (DateRangeFilter, TextSearchFilter)
"""
