#!/usr/bin/env python3
"""
Unit tests for the candidate pre-filter.
"""

import unittest

from core.matching import TimeRange, filter_eligible_workers, is_eligible
from tests import make_job, make_worker, utc, FAR_AWAY


class TestIsEligible(unittest.TestCase):
    """Tests for the individual pre-filter rules."""

    def test_aligned_worker_is_eligible(self):
        self.assertTrue(is_eligible(make_job(), make_worker()))

    def test_requires_a_shared_skill(self):
        self.assertFalse(is_eligible(make_job(), make_worker(skills=("Stagehand", "Runner"))))
        self.assertFalse(is_eligible(make_job(), make_worker(skills=())))

    def test_job_rate_must_be_inside_band(self):
        self.assertFalse(is_eligible(make_job(), make_worker(min_rate=40.0, max_rate=60.0)))
        self.assertFalse(is_eligible(make_job(), make_worker(min_rate=10.0, max_rate=20.0)))
        self.assertTrue(is_eligible(make_job(), make_worker(min_rate=25.0, max_rate=25.0)))

    def test_job_must_be_within_radius(self):
        self.assertFalse(is_eligible(make_job(), make_worker(home_location=FAR_AWAY)))
        self.assertFalse(is_eligible(make_job(), make_worker(radius_km=5.0)))

    def test_radius_ignored_without_job_location(self):
        job = make_job(location=None)
        self.assertTrue(is_eligible(job, make_worker(home_location=FAR_AWAY)))

    def test_booked_worker_excluded(self):
        self.assertFalse(is_eligible(make_job(), make_worker(), booked_worker_ids={"worker_1"}))

    def test_booked_worker_allowed_when_invited(self):
        self.assertTrue(is_eligible(
            make_job(), make_worker(), booked_worker_ids={"worker_1"}, invite_worker_id="worker_1"
        ))

    def test_requires_overlapping_availability(self):
        next_day = (TimeRange(utc(2024, 2, 2, 10), utc(2024, 2, 2, 22)),)
        touching = (TimeRange(utc(2024, 2, 1, 8), utc(2024, 2, 1, 12)),)

        self.assertFalse(is_eligible(make_job(), make_worker(availability=())))
        self.assertFalse(is_eligible(make_job(), make_worker(availability=next_day)))
        self.assertFalse(is_eligible(make_job(), make_worker(availability=touching)))


class TestFilterEligibleWorkers(unittest.TestCase):
    """Tests for filter_eligible_workers."""

    def test_preserves_input_order(self):
        workers = [
            make_worker(id="c"),
            make_worker(id="expensive", min_rate=40.0, max_rate=60.0),
            make_worker(id="a"),
            make_worker(id="far", home_location=FAR_AWAY),
            make_worker(id="b"),
        ]

        eligible = filter_eligible_workers(make_job(), workers)

        self.assertEqual([w.id for w in eligible], ["c", "a", "b"])

    def test_booked_and_invited(self):
        workers = [make_worker(id="a"), make_worker(id="b")]

        self.assertEqual(
            [w.id for w in filter_eligible_workers(make_job(), workers, {"a", "b"})],
            [],
        )
        self.assertEqual(
            [w.id for w in filter_eligible_workers(make_job(), workers, {"a", "b"}, "b")],
            ["b"],
        )


if __name__ == '__main__':
    unittest.main()
