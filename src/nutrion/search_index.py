"""Trie-backed name search over the food catalog.

The index maps normalized food names to catalog records and answers
typeahead queries with three strategies: prefix, substring ("partial")
and bounded edit-distance ("fuzzy"). ``intelligent_search`` chains them
into one result list and ``get_suggestions`` re-ranks that list.

Every node on a key's path keeps a list of the records reachable through
it, capped at ``MAX_RECORDS_PER_NODE``. Lists are append-only, so once a
node saturates it keeps its earliest records and ``search_prefix`` is no
longer exhaustive for that prefix.

The index is synchronous, does no I/O and has no internal locking. It is
owned by one catalog and rebuilt (``clear`` + reinsert) whenever the
catalog's record set changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nutrion.models.catalog import CatalogRecord, IndexStats
from nutrion.normalize import normalize

MAX_RECORDS_PER_NODE = 200

# Fuzzy matching only kicks in for queries longer than this (normalized).
FUZZY_MIN_QUERY_LENGTH = 3


@dataclass
class IndexNode:
    """One normalized character in the trie."""

    children: dict[str, IndexNode] = field(default_factory=dict)
    # Sampled, not exhaustive: see MAX_RECORDS_PER_NODE
    records: list[CatalogRecord] = field(default_factory=list)
    terminal: bool = False


class NameSearchIndex:
    """Prefix/substring/fuzzy lookup of catalog records by name."""

    def __init__(self) -> None:
        self._root = IndexNode()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, name: str, record: CatalogRecord) -> None:
        node = self._root
        for char in normalize(name):
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = IndexNode()
            node = child
            if len(node.records) < MAX_RECORDS_PER_NODE:
                node.records.append(record)
        node.terminal = True

    def clear(self) -> None:
        """Drop every entry. Callers reinsert surviving records afterwards."""
        self._root = IndexNode()

    # ------------------------------------------------------------------
    # Lookup strategies
    # ------------------------------------------------------------------

    def search_prefix(self, prefix: str) -> list[CatalogRecord]:
        key = normalize(prefix)
        if not key:
            return []
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                return []
            node = child
        return list(node.records)

    def partial_search(self, query: str) -> list[CatalogRecord]:
        """Records whose normalized name contains the normalized query.

        Scans every record in the trie on each call. A query that normalizes
        to nothing (punctuation only) matches every record.
        """
        key = normalize(query)
        return [record for record in self._all_records() if key in normalize(record.name)]

    def fuzzy_search(self, query: str, max_edit_distance: int = 1) -> set[CatalogRecord]:
        results: set[CatalogRecord] = set()
        self._fuzzy_walk(self._root, normalize(query), 0, max_edit_distance, results)
        return results

    def _fuzzy_walk(
        self,
        node: IndexNode,
        query: str,
        position: int,
        budget: int,
        results: set[CatalogRecord],
    ) -> None:
        # Every call advances position or spends budget, so recursion depth
        # is bounded by len(query) + max_edit_distance.
        if position >= len(query):
            if budget >= 0:
                results.update(node.records)
            return

        target = query[position]

        match = node.children.get(target)
        if match is not None:
            self._fuzzy_walk(match, query, position + 1, budget, results)

        if budget <= 0:
            return

        # Substitution
        for char, child in node.children.items():
            if char != target:
                self._fuzzy_walk(child, query, position + 1, budget - 1, results)

        # Insertion: the query has an extra character
        self._fuzzy_walk(node, query, position + 1, budget - 1, results)

        # Deletion: the name has an extra character
        for child in node.children.values():
            self._fuzzy_walk(child, query, position, budget - 1, results)

    # ------------------------------------------------------------------
    # Combined search and ranking
    # ------------------------------------------------------------------

    def intelligent_search(self, query: str, limit: int = 50) -> list[CatalogRecord]:
        """Prefix hits first, then substring hits, then fuzzy hits.

        Results are deduplicated by name and keep the order in which they
        were found. The fuzzy pass only runs for normalized queries longer
        than ``FUZZY_MIN_QUERY_LENGTH`` characters.
        """
        if not query.strip() or limit <= 0:
            return []
        key = normalize(query)

        results: dict[str, CatalogRecord] = {}

        for record in self.search_prefix(query)[:limit]:
            results.setdefault(record.name, record)

        if len(results) < limit:
            _fill(results, self.partial_search(query), limit)

        if len(results) < limit and len(key) > FUZZY_MIN_QUERY_LENGTH:
            # Sets have no stable order; sort so repeated runs agree
            fuzzy = sorted(self.fuzzy_search(query, 1), key=lambda r: r.name)
            _fill(results, fuzzy, limit)

        return list(results.values())[:limit]

    def get_suggestions(self, query: str, limit: int = 10) -> list[CatalogRecord]:
        candidates = self.intelligent_search(query, limit * 2)
        ranked = sorted(candidates, key=lambda r: _relevance(r.name, query), reverse=True)
        return ranked[:limit]

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def get_stats(self) -> IndexStats:
        total_nodes = 0
        total_records = 0
        max_depth = 0

        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            total_nodes += 1
            total_records += len(node.records)
            max_depth = max(max_depth, depth)
            stack.extend((child, depth + 1) for child in node.children.values())

        return IndexStats(
            total_nodes=total_nodes,
            total_records=total_records,
            max_depth=max_depth,
            max_records_per_node=MAX_RECORDS_PER_NODE,
        )

    def _all_records(self) -> list[CatalogRecord]:
        """Every record reachable from the root, deduplicated by name (first seen wins)."""
        seen: dict[str, CatalogRecord] = {}
        self._collect(self._root, seen)
        return list(seen.values())

    def _collect(self, node: IndexNode, seen: dict[str, CatalogRecord]) -> None:
        for record in node.records:
            seen.setdefault(record.name, record)
        for child in node.children.values():
            self._collect(child, seen)


def _fill(
    results: dict[str, CatalogRecord],
    candidates: list[CatalogRecord],
    limit: int,
) -> None:
    for record in candidates:
        if len(results) >= limit:
            return
        results.setdefault(record.name, record)


def _relevance(name: str, query: str) -> int:
    normalized_name = normalize(name)
    normalized_query = normalize(query)
    if normalized_name.startswith(normalized_query):
        return 100
    if normalized_query in normalized_name:
        return 50
    return max(0, 25 - abs(len(name) - len(query)))
