"""Text-overlap matching between trips.

Two trips are compared on their place names only. A source (or destination)
pair overlaps when either lowercased name contains the other, so an empty
name overlaps with everything.
"""

from typing import List, Sequence

from services.rideshare_service.models import MatchQuality, Trip

# Highest score still accepted as a match: perfect and partial pass, none fails.
MATCH_THRESHOLD = 2


def _overlaps(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def match_quality(
    source_a: str, dest_a: str, source_b: str, dest_b: str
) -> MatchQuality:
    source_match = _overlaps(source_a, source_b)
    dest_match = _overlaps(dest_a, dest_b)

    if source_match and dest_match:
        return MatchQuality.PERFECT
    if source_match or dest_match:
        return MatchQuality.PARTIAL
    return MatchQuality.NONE


def score(source_a: str, dest_a: str, source_b: str, dest_b: str) -> int:
    """Return 0 (perfect), 1 (partial) or 5 (no match). Symmetric in the two pairs."""
    return match_quality(source_a, dest_a, source_b, dest_b).value


def is_match(source_a: str, dest_a: str, source_b: str, dest_b: str) -> bool:
    return score(source_a, dest_a, source_b, dest_b) <= MATCH_THRESHOLD


def filter_matches(
    source: str,
    destination: str,
    candidates: Sequence[Trip],
    query_first: bool = True,
) -> List[Trip]:
    """
    Keep the candidates whose route overlaps the query route.

    ``query_first`` controls whether the query pair is passed as the first
    or second pair to the scorer (rider searches pass it first, passenger
    searches pass the rider's pair first). Order of ``candidates`` is kept.
    """
    matches = []
    for trip in candidates:
        if query_first:
            matched = is_match(source, destination, trip.source, trip.destination)
        else:
            matched = is_match(trip.source, trip.destination, source, destination)
        if matched:
            matches.append(trip)
    return matches
