"""pgfts — PostgreSQL full-text search engine driver.

Indexes application records into a tsvector column and runs ranked
full-text queries against it, behind a pluggable ``SearchEngine`` contract.
"""

__version__ = "0.1.0"
