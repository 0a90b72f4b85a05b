"""
Product search package.

Exposes the search blueprint (see `routes.py`) and the engine behind it
(`services.py`): filtering, relevance scoring, sorting, facet counts,
pagination and query suggestions over the in-memory catalog.
"""
