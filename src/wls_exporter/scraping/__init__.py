"""
Scraping helpers driven by the selector tree: search request bodies and
interpretation of the responses.
"""

from .request import build_query_request, request_fields
from .scraper import MetricSample, MetricsScraper

__all__ = [
    "build_query_request",
    "request_fields",
    "MetricSample",
    "MetricsScraper",
]
