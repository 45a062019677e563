#!/usr/bin/env python3
"""
Ranking and grouping of sourced definitions by dictionary
"""

from typing import Iterable, List

from .models import GroupedDefinitions, SourcedDefinition


def group_by_dictionary(items: Iterable[SourcedDefinition]) -> GroupedDefinitions:
    """
    Group definitions by dictionary name, each group ordered by rank.

    Dictionaries appear in the order they are first seen. Definitions sharing a
    rank keep their input order.
    """
    pre = {}  # Used for ranking, not returned
    for item in items:
        pre.setdefault(item.dictionary, []).append(item)

    grouped = {}
    for dictionary, ranked in pre.items():
        ranked.sort(key=lambda item: item.rank)
        grouped[dictionary] = [item.definition for item in ranked]
    return grouped


def flatten_grouped(grouped: GroupedDefinitions) -> List[SourcedDefinition]:
    """Turn grouped definitions back into sourced definitions, ranked by position"""
    return [
        SourcedDefinition(dictionary=dictionary, rank=rank, definition=definition)
        for dictionary, definitions in grouped.items()
        for rank, definition in enumerate(definitions)
    ]
