import unittest

from _fakes import fixture

from apodgallery.ingestion.archive_parser import month_number, parse_archive, parse_entry_date


class TestArchiveParser(unittest.TestCase):
    def setUp(self):
        self.stubs = parse_archive(fixture("archive.html"), 2025)

    def test_keeps_matching_entries_in_document_order(self):
        self.assertEqual(
            [s.href for s in self.stubs],
            ["ap250103.html", "ap250102.html", "ap250101.html", "ap250102b.html"],
        )

    def test_builds_iso_dates_and_titles(self):
        first = self.stubs[0]
        self.assertEqual(first.date, "2025-01-03")
        self.assertEqual(first.title, "Quadrantids over the Great Wall")

    def test_other_years_are_excluded(self):
        self.assertTrue(all(s.date.startswith("2025-") for s in self.stubs))
        self.assertNotIn("ap241231.html", [s.href for s in self.stubs])
        self.assertEqual([s.href for s in parse_archive(fixture("archive.html"), 2024)], ["ap241231.html"])

    def test_invalid_dates_and_unknown_months_are_dropped(self):
        hrefs = [s.href for s in self.stubs]
        self.assertNotIn("ap250230.html", hrefs)
        self.assertNotIn("ap250104.html", hrefs)

    def test_duplicate_dates_are_kept(self):
        dates = [s.date for s in self.stubs]
        self.assertEqual(dates.count("2025-01-02"), 2)

    def test_non_matching_and_empty_input(self):
        self.assertEqual(parse_archive('<a href="x.html">Archive</a>', 2025), [])
        self.assertEqual(parse_archive("", 2025), [])

    def test_month_names_are_locale_independent(self):
        self.assertEqual(month_number("January"), 1)
        self.assertEqual(month_number("DECEMBER"), 12)
        self.assertEqual(month_number("sep"), 9)
        self.assertIsNone(month_number("Smarch"))
        self.assertIsNone(parse_entry_date("2025", "February", "29"))
        self.assertEqual(parse_entry_date("2024", "February", "29").isoformat(), "2024-02-29")


if __name__ == "__main__":
    unittest.main()
