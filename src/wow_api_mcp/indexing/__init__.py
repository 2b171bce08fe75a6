"""
Indexing package: annotation parsing strategies, record models and the
index builder (``indexing.api_index_builder``).
"""
