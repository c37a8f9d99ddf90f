"""
Shelflife validation — isolated, testable, reusable.

A batch only counts as available for a new order if it still has at least
LOOKAHEAD_WEEKS of shelf life left, i.e. its due date is on or after
today + LOOKAHEAD_WEEKS.

Examples (LOOKAHEAD_WEEKS=3, today=2026-03-02):
    - due 2026-05-11 (10 weeks): available
    - due 2026-03-23 (exactly 3 weeks): available
    - due 2026-03-09 (1 week): not available
"""

from datetime import date, timedelta

from frescos import clock
from frescos.conf import frescos_settings


def availability_cutoff(reference: date | None = None) -> date:
    """
    Earliest due date a batch may have and still count as available.

    Args:
        reference: Date the look-ahead window starts from (None = clock.today())

    Returns:
        reference + LOOKAHEAD_WEEKS
    """
    start = reference or clock.today()
    return start + timedelta(weeks=frescos_settings.LOOKAHEAD_WEEKS)


def is_available(batch, cutoff: date) -> bool:
    """Check if a single batch is still valid at the cutoff."""
    return batch.due_date >= cutoff


def filter_available(batches, cutoff: date):
    """
    Filter a BatchStock queryset to batches still valid at the cutoff.

    Queryset-level version of is_available. Empty batches are dropped since
    they contribute nothing to availability.
    """
    return batches.filter(due_date__gte=cutoff, quantity__gt=0)
