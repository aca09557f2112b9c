"""Football transfer-market aggregation and charting."""
