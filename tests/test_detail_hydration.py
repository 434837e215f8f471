import unittest
from unittest import mock

from _fakes import CountingPacer, FakeFetcher, fixture
from bs4 import BeautifulSoup

from apodgallery.extraction.detail import extract_media, hydrate_entry, parse_detail
from apodgallery.extraction.explanation import get_strategy, longest_paragraph_explanation
from apodgallery.extraction.fetch import HTML_PARSER
from apodgallery.ingestion.entry_types import SERVICE_VERSION, EntryStub


BASE = "https://apod.nasa.gov/apod/"


def stub(href="ap250103.html", date="2025-01-03", title="Quadrantids over the Great Wall"):
    return EntryStub(date=date, title=title, href=href)


class TestMediaExtraction(unittest.TestCase):
    def test_youtube_iframe_is_video_with_thumbnail(self):
        rec = parse_detail(stub(), fixture("detail_video.html"), BASE)
        self.assertEqual(rec.media_type, "video")
        self.assertEqual(rec.url, "https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0")
        self.assertEqual(rec.thumbnail_url, "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg")
        self.assertIsNone(rec.hdurl)

    def test_vimeo_iframe_is_video_without_thumbnail(self):
        soup = BeautifulSoup('<iframe src="https://player.vimeo.com/video/1234"></iframe><img src="a.jpg">', HTML_PARSER)
        media = extract_media(soup, BASE)
        self.assertEqual(media.media_type, "video")
        self.assertIsNone(media.thumbnail_url)

    def test_unrelated_iframe_falls_through_to_image(self):
        soup = BeautifulSoup('<iframe src="https://example.com/widget"></iframe><img src="a.jpg">', HTML_PARSER)
        media = extract_media(soup, BASE)
        self.assertEqual(media.media_type, "image")
        self.assertEqual(media.url, "https://apod.nasa.gov/apod/a.jpg")

    def test_linked_image_sets_hdurl(self):
        rec = parse_detail(stub(href="ap250102.html"), fixture("detail_image_linked.html"), BASE)
        self.assertEqual(rec.media_type, "image")
        self.assertEqual(rec.url, "https://apod.nasa.gov/apod/image/2501/EarthTwilight_1024.jpg")
        self.assertEqual(rec.hdurl, "https://apod.nasa.gov/apod/image/2501/EarthTwilight_hd.jpg")
        self.assertIsNone(rec.thumbnail_url)

    def test_unlinked_image_has_no_hdurl(self):
        rec = parse_detail(stub(href="ap250101.html"), fixture("detail_image_plain.html"), BASE)
        self.assertEqual(rec.media_type, "image")
        self.assertEqual(rec.url, "https://apod.nasa.gov/apod/image/2501/MoonEclipse_1080.jpg")
        self.assertIsNone(rec.hdurl)

    def test_no_media_is_unknown(self):
        rec = parse_detail(stub(), fixture("detail_no_media.html"), BASE)
        self.assertEqual(rec.media_type, "unknown")
        self.assertIsNone(rec.url)
        self.assertIsNone(rec.hdurl)
        self.assertIsNone(rec.thumbnail_url)
        self.assertEqual(rec.explanation, "Nothing here.")


class TestExplanation(unittest.TestCase):
    def test_longest_paragraph_wins(self):
        rec = parse_detail(stub(), fixture("detail_video.html"), BASE)
        self.assertTrue(rec.explanation.startswith("Explanation:"))
        self.assertIn("Quadrantid meteor shower", rec.explanation)

    def test_first_of_equal_length_wins(self):
        soup = BeautifulSoup("<body><p>aaaa</p><p>bbbb</p></body>", HTML_PARSER)
        self.assertEqual(longest_paragraph_explanation(soup), "aaaa")

    def test_empty_document(self):
        self.assertEqual(longest_paragraph_explanation(BeautifulSoup("", HTML_PARSER)), "")

    def test_main_text_falls_back_to_longest_paragraph(self):
        soup = BeautifulSoup("<body><p>short</p><p>the longer one</p></body>", HTML_PARSER)
        with mock.patch("apodgallery.extraction.explanation.trafilatura.extract", return_value=None):
            self.assertEqual(get_strategy("main_text")(soup), "the longer one")
        with mock.patch("apodgallery.extraction.explanation.trafilatura.extract", return_value="  extracted body \n"):
            self.assertEqual(get_strategy("main_text")(soup), "extracted body")

    def test_unknown_strategy_name(self):
        with self.assertRaises(ValueError):
            get_strategy("transcript")
        self.assertIs(get_strategy("longest_paragraph"), longest_paragraph_explanation)


class TestUnclosedParagraphMarkup(unittest.TestCase):
    """APOD pages never close their <p> tags."""

    def setUp(self):
        self.rec = parse_detail(
            stub(href="ap250103.html"), fixture("detail_apod_unclosed.html"), BASE
        )

    def test_explanation_stops_at_next_paragraph(self):
        self.assertTrue(self.rec.explanation.startswith("Explanation:"))
        self.assertIn("Quadrantid meteor shower", self.rec.explanation)
        self.assertTrue(self.rec.explanation.endswith("just before dawn."))
        self.assertNotIn("Tomorrow's picture", self.rec.explanation)
        self.assertNotIn("Archive", self.rec.explanation)
        self.assertNotIn("NASA Official", self.rec.explanation)

    def test_linked_image_is_found(self):
        self.assertEqual(self.rec.media_type, "image")
        self.assertEqual(self.rec.url, "https://apod.nasa.gov/apod/image/2501/QuadsGreatWall_1024.jpg")
        self.assertEqual(self.rec.hdurl, "https://apod.nasa.gov/apod/image/2501/QuadsGreatWall_hd.jpg")


class TestHydrateEntry(unittest.TestCase):
    def test_fetches_base_plus_href_and_tags_version(self):
        fetch = FakeFetcher({BASE + "ap250103.html": fixture("detail_video.html")})
        pace = CountingPacer()
        rec = hydrate_entry(stub(), fetch=fetch, base_url=BASE, pace=pace)
        self.assertEqual(fetch.calls, [BASE + "ap250103.html"])
        self.assertEqual(rec.service_version, SERVICE_VERSION)
        self.assertEqual(rec.date, "2025-01-03")
        self.assertEqual(rec.title, "Quadrantids over the Great Wall")
        self.assertEqual(pace.count, 1)

    def test_network_error_degrades_record(self):
        pace = CountingPacer()
        with self.assertLogs("apodgallery.extraction.detail", level="ERROR") as logs:
            rec = hydrate_entry(stub(href="ap250199.html"), fetch=FakeFetcher({}), base_url=BASE, pace=pace)
        self.assertEqual(rec.media_type, "unknown")
        self.assertIsNone(rec.url)
        self.assertEqual(rec.explanation, "")
        self.assertEqual(rec.href, "ap250199.html")
        self.assertEqual(pace.count, 1)
        self.assertIn("ap250199.html", logs.output[0])

    def test_same_html_gives_same_record(self):
        fetch = FakeFetcher({BASE + "ap250102.html": fixture("detail_image_linked.html")})
        s = stub(href="ap250102.html")
        self.assertEqual(
            hydrate_entry(s, fetch=fetch, base_url=BASE),
            hydrate_entry(s, fetch=fetch, base_url=BASE),
        )


if __name__ == "__main__":
    unittest.main()
