"""
Rate Resolver

Looks up the commission rate for an (account, media) pair in the rate master.
"""

from decimal import Decimal
from typing import Iterable, Optional

from ..models import CommissionRate


class RateResolver:
    """
    Resolves commission rates against a rate master table.

    Matching is exact and case-sensitive on both account_id and media.
    When the table holds several entries for the same pair, the first one
    wins. A pair with no entry resolves to a 0% rate.
    """

    def __init__(self, rates: Iterable[CommissionRate] = ()):
        self._index: dict[tuple[str, str], CommissionRate] = {}
        for entry in rates:
            self._index.setdefault(entry.key, entry)

    def find(self, account_id: str, media: str) -> Optional[CommissionRate]:
        """Return the rate master entry for the pair, or None."""
        return self._index.get((account_id, media))

    def resolve(self, account_id: str, media: str) -> Decimal:
        """Return the rate (percentage) for the pair, 0 when no entry exists."""
        entry = self.find(account_id, media)
        return entry.rate if entry else Decimal("0")

    def has_master(self, account_id: str, media: str) -> bool:
        return (account_id, media) in self._index


def resolve_rate(account_id: str, media: str, rates: Iterable[CommissionRate]) -> Decimal:
    """Return the rate of the first entry matching (account_id, media), else 0."""
    for entry in rates:
        if entry.account_id == account_id and entry.media == media:
            return entry.rate
    return Decimal("0")
