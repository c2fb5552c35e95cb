"""Parsers turning raw source text into widget values."""

from .digits import MAX_NUMBER, parse_number, scrape_digits, strip_newline, to_data

__all__ = ["MAX_NUMBER", "parse_number", "scrape_digits", "strip_newline", "to_data"]
