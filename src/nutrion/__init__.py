"""Nutrion: glycemic load food catalog with typeahead name search."""

from __future__ import annotations

from nutrion.normalize import normalize
from nutrion.search_index import MAX_RECORDS_PER_NODE, NameSearchIndex

__all__ = ["MAX_RECORDS_PER_NODE", "NameSearchIndex", "normalize"]
