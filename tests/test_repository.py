import unittest

from fetchers.base import ParseError, TransportError
from filters import keyword_filter
from models import Level, Location, Posting, Skill
from repository import JobRepository, Snapshot, build_snapshot, newest_first


def _job(title, company="Acme", date="2024-01-01", location="Remote", source="a"):
    return Posting(
        title=title,
        company=company,
        date_posted=date,
        location=location,
        remuneration="",
        source=source,
    )


class FakeSource:
    def __init__(self, name, jobs=None, error=None):
        self.name = name
        self.jobs = list(jobs or [])
        self.error = error

    def fetch(self):
        if self.error is not None:
            raise self.error
        return list(self.jobs)


class EndToEndTests(unittest.TestCase):
    def test_one_source_up_one_down(self):
        a = FakeSource("a", [_job("Senior Backend Engineer", "Acme", "2024-01-01", "Remote")])
        b = FakeSource("b", error=TransportError("b", "connection reset"))

        snapshot = build_snapshot([a, b])

        self.assertEqual(len(snapshot.postings), 1)
        self.assertEqual(len(snapshot.get("location", "Remote")), 1)
        self.assertEqual(len(snapshot.get("skill", "Backend")), 1)
        self.assertEqual(len(snapshot.get("level", "Senior")), 1)
        self.assertEqual(len(snapshot.get("company", "Acme")), 1)
        self.assertEqual(snapshot.failed_sources, ["b"])

    def test_lead_platform_manager(self):
        snapshot = build_snapshot([FakeSource("a", [_job("Lead Platform Manager")])])
        self.assertEqual(len(snapshot.get("level", Level.LEAD)), 1)
        self.assertEqual(len(snapshot.get("level", Level.MANAGER)), 1)
        self.assertEqual(len(snapshot.get("skill", Skill.DEVOPS)), 1)

    def test_filter_excludes_from_every_index(self):
        jobs = [
            _job("Backend Engineer", "One", "2024-01-01"),
            _job("Head of Growth", "Two", "2024-01-02", "Berlin"),
            _job("Frontend Engineer", "Three", "2024-01-03"),
        ]
        snapshot = build_snapshot([FakeSource("a", jobs)], include=keyword_filter(["engineer"]))

        self.assertEqual(len(snapshot.postings), 2)
        excluded = jobs[1]
        for name in ("date", "company", "location", "skill", "level"):
            mapping = getattr(snapshot.indices, name)
            for bucket in mapping.values():
                self.assertNotIn(excluded, bucket)
        self.assertEqual(snapshot.get("company", "Two"), ())
        self.assertEqual(snapshot.get("location", Location.ONSITE), ())

    def test_every_source_failing(self):
        snapshot = build_snapshot([FakeSource("a", error=ParseError("a", "bad body"))])
        self.assertEqual(snapshot.postings, ())
        self.assertEqual(snapshot.get("date", "2024-01-01"), ())


class SnapshotQueryTests(unittest.TestCase):
    def setUp(self):
        self.jobs = [
            _job("Engineer", "Beta", "2024-01-01"),
            _job("Engineer", "Alpha", "2024-01-03"),
            _job("Engineer", "Alpha", "2024-01-01"),
            _job("Engineer", "Gamma", "2024-01-03"),
        ]
        self.snapshot = build_snapshot([FakeSource("a", self.jobs)])

    def test_absent_key_gives_empty(self):
        self.assertEqual(self.snapshot.get("company", "Nobody"), ())
        self.assertEqual(self.snapshot.get("skill", "Blockchain"), ())
        self.assertEqual(self.snapshot.get("level", "Wizard"), ())

    def test_unhashable_key_gives_empty(self):
        self.assertEqual(self.snapshot.get("company", ["Acme"]), ())
        self.assertEqual(self.snapshot.get("date", {"day": 1}), ())

    def test_enum_lookup_by_display_value(self):
        self.assertEqual(self.snapshot.get("location", "remote"), self.snapshot.get("location", Location.REMOTE))
        self.assertEqual(len(self.snapshot.get("location", "Remote")), 4)

    def test_unknown_index_rejected(self):
        with self.assertRaises(ValueError):
            self.snapshot.get("salary", "100k")

    def test_all_preserves_collection_order(self):
        self.assertEqual(self.snapshot.all(), self.jobs)

    def test_sorted_view_does_not_mutate_snapshot(self):
        ordered = self.snapshot.all(key=lambda job: job.company)
        self.assertEqual([j.company for j in ordered], ["Alpha", "Alpha", "Beta", "Gamma"])
        self.assertEqual(list(self.snapshot.postings), self.jobs)

    def test_newest_first(self):
        ordered = newest_first(self.snapshot.postings)
        self.assertEqual(
            [(j.date_posted, j.company) for j in ordered],
            [("2024-01-03", "Alpha"), ("2024-01-03", "Gamma"), ("2024-01-01", "Alpha"), ("2024-01-01", "Beta")],
        )
        self.assertEqual(list(self.snapshot.postings), self.jobs)


class JobRepositoryTests(unittest.TestCase):
    def test_empty_before_first_refresh(self):
        repo = JobRepository([FakeSource("a", [_job("Engineer")])])
        self.assertEqual(repo.all(), [])
        self.assertEqual(repo.get("company", "Acme"), ())

    def test_refresh_publishes_new_snapshot_and_keeps_old_one_intact(self):
        source = FakeSource("a", [_job("Backend Engineer")])
        repo = JobRepository([source])
        first = repo.refresh()

        source.jobs = [_job("Frontend Engineer"), _job("Platform Engineer")]
        second = repo.refresh()

        self.assertIsNot(first, second)
        self.assertIs(repo.snapshot, second)
        self.assertEqual([j.title for j in first.postings], ["Backend Engineer"])
        self.assertEqual(len(first.get("skill", "Backend")), 1)
        self.assertEqual(len(second.postings), 2)
        self.assertEqual(repo.get("skill", "Backend"), ())
        self.assertEqual(len(repo.get("skill", "DevOps")), 1)

    def test_refresh_does_not_accumulate(self):
        repo = JobRepository([FakeSource("a", [_job("Backend Engineer")])])
        repo.refresh()
        repo.refresh()
        self.assertEqual(len(repo.all()), 1)
        self.assertEqual(len(repo.get("company", "Acme")), 1)

    def test_refresh_applies_include(self):
        repo = JobRepository(
            [FakeSource("a", [_job("Backend Engineer"), _job("Recruiter")])],
            include=keyword_filter(["engineer"]),
        )
        snapshot = repo.refresh()
        self.assertEqual([j.title for j in snapshot.postings], ["Backend Engineer"])
        self.assertEqual(snapshot.reports[0].count, 2)

    def test_snapshot_is_frozen(self):
        snapshot = Snapshot.empty()
        with self.assertRaises(AttributeError):
            snapshot.postings = ()


if __name__ == "__main__":
    unittest.main()
