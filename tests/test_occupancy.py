"""
Unit tests for OccupancyTracker.
"""

from extractors.occupancy import OccupancyTracker


class TestOccupancyTracker:
    """Test suite for row-span claims and column resolution."""

    def setup_method(self):
        self.tracker = OccupancyTracker()

    def test_unclaimed_row_keeps_column(self):
        assert self.tracker.resolve_column(0, 3) == 3
        assert self.tracker.claimed(5) == frozenset()

    def test_claim_covers_following_rows_only(self):
        self.tracker.claim(row=1, col=2, row_span=3, col_span=2)
        assert self.tracker.claimed(1) == frozenset()
        assert self.tracker.claimed(2) == {2, 3}
        assert self.tracker.claimed(3) == {2, 3}
        assert self.tracker.claimed(4) == frozenset()

    def test_single_row_span_claims_nothing(self):
        self.tracker.claim(row=0, col=0, row_span=1, col_span=4)
        assert self.tracker.claimed(1) == frozenset()

    def test_claim_at_column_shifts_cell(self):
        self.tracker.claim(row=0, col=0, row_span=2, col_span=1)
        assert self.tracker.resolve_column(1, 0) == 1

    def test_claims_after_column_are_ignored(self):
        self.tracker.claim(row=0, col=3, row_span=2, col_span=1)
        assert self.tracker.resolve_column(1, 0) == 0
        assert self.tracker.resolve_column(1, 2) == 2

    def test_shift_cascades_into_newly_reached_claims(self):
        # columns 0 and 1 both claimed: the first shift lands on 1, which
        # is claimed too, so a second pass pushes to 2
        self.tracker.claim(row=0, col=0, row_span=2, col_span=1)
        self.tracker.claim(row=0, col=1, row_span=2, col_span=1)
        assert self.tracker.resolve_column(1, 0) == 2

    def test_tentative_column_counts_every_earlier_claim(self):
        # claims {0, 3}; tentative 1 → past 0 → 2; 3 is not reached
        self.tracker.claim(row=0, col=0, row_span=2, col_span=1)
        self.tracker.claim(row=0, col=3, row_span=2, col_span=1)
        assert self.tracker.resolve_column(1, 1) == 2
        # tentative 2 → past 0 → 3 → past 3 → 4
        assert self.tracker.resolve_column(1, 2) == 4

    def test_rows_do_not_share_claim_sets(self):
        self.tracker.claim(row=0, col=0, row_span=3, col_span=1)
        self.tracker.claim(row=1, col=5, row_span=2, col_span=1)
        assert self.tracker.claimed(1) == {0}
        assert self.tracker.claimed(2) == {0, 5}
