"""Caller-side services built on the Ultra clients."""

from ultraswap.services.quote_refresher import LatestQuoteRequester
from ultraswap.services.quote_summary import QuoteSummary, summarize_quote

__all__ = ["LatestQuoteRequester", "QuoteSummary", "summarize_quote"]
