"""Tests for the plain-text result formatters."""

from __future__ import annotations

from brave_search_mcp.brave.models import (
    LocalDescriptionsResponse,
    LocalPoiResponse,
    NewsResult,
    OpeningHours,
    PoiRecord,
    VideoResult,
    WebResult,
)
from brave_search_mcp.formatting import (
    format_news_results,
    format_opening_hours,
    format_poi_results,
    format_video_results,
    format_web_results,
)


def _day(name: str, opens: str, closes: str) -> dict:
    return {"abbr_name": name[:3], "full_name": name, "opens": opens, "closes": closes}


class TestWebResults:
    def test_two_results(self):
        results = [
            WebResult(title="A", url="u1", description="d1"),
            WebResult(title="B", url="u2", description="d2"),
        ]
        assert format_web_results(results) == (
            "Title: A\nURL: u1\nDescription: d1\n\nTitle: B\nURL: u2\nDescription: d2"
        )


class TestNewsResults:
    def test_includes_age(self):
        text = format_news_results([NewsResult(title="T", url="u", description="d", age="2 hours ago")])
        assert text == "Title: T\nURL: u\nAge: 2 hours ago\nDescription: d"


class TestOpeningHours:
    def test_today_and_weekly(self):
        hours = OpeningHours.model_validate({
            "current_day": [_day("Monday", "09:00", "17:00")],
            "days": [
                [_day("Monday", "09:00", "17:00")],
                [_day("Tuesday", "09:00", "12:00"), _day("Tuesday", "13:00", "17:00")],
            ],
        })
        assert format_opening_hours(hours) == (
            "Today: Monday 09:00 - 17:00\n"
            "Weekly:\n"
            "Monday 09:00 - 17:00\n"
            "Tuesday 09:00 - 12:00, Tuesday 13:00 - 17:00"
        )

    def test_values_passed_through(self):
        hours = OpeningHours.model_validate({
            "current_day": [_day("Sunday", "24 hours", "")],
            "days": [],
        })
        assert format_opening_hours(hours).startswith("Today: Sunday 24 hours - \n")


class TestPoiResults:
    def _pois(self, *records: dict) -> LocalPoiResponse:
        return LocalPoiResponse.model_validate({"results": list(records)})

    def test_full_record(self):
        pois = self._pois({
            "id": "a",
            "title": "Luigi's",
            "serves_cuisine": ["Italian", "Pizza"],
            "postal_address": {"displayAddress": "1 Main St"},
            "contact": {"telephone": "+1 555", "email": "hi@luigi.test"},
            "price_range": "$$",
            "rating": {"ratingValue": 4.5, "reviewCount": 120},
            "opening_hours": {
                "current_day": [_day("Monday", "11:00", "22:00")],
                "days": [[_day("Monday", "11:00", "22:00")]],
            },
        })
        descriptions = LocalDescriptionsResponse.model_validate(
            {"results": [{"id": "a", "description": "Wood-fired pizza"}]}
        )
        assert format_poi_results(pois, descriptions) == (
            "Name: Luigi's\n"
            "Cuisine: Italian, Pizza\n"
            "Address: 1 Main St\n"
            "Phone: +1 555\n"
            "Email: hi@luigi.test\n"
            "Price Range: $$\n"
            "Ratings: 4.5 (120) reviews\n"
            "Hours:\n"
            "Today: Monday 11:00 - 22:00\n"
            "Weekly:\n"
            "Monday 11:00 - 22:00\n"
            "Description: Wood-fired pizza"
        )

    def test_placeholders(self):
        pois = self._pois({"id": "a", "title": "Bare", "postal_address": {"displayAddress": "2 Side St"}})
        text = format_poi_results(pois, LocalDescriptionsResponse())
        assert "Cuisine:" not in text
        assert "Phone: No phone number found" in text
        assert "Email: No email found" in text
        assert "Price Range: No price range found" in text
        assert "Ratings: N/A (N/A) reviews" in text
        assert "Hours:\nNo opening hours found" in text
        assert text.endswith("Description: No description found")

    def test_zero_rating_is_not_available(self):
        pois = self._pois({"id": "a", "title": "New", "rating": {"ratingValue": 0, "reviewCount": 0}})
        text = format_poi_results(pois, LocalDescriptionsResponse())
        assert "Ratings: N/A (0) reviews" in text

    def test_description_matched_by_id(self):
        pois = self._pois({"id": "a", "title": "First"}, {"id": "b", "title": "Second"})
        descriptions = LocalDescriptionsResponse.model_validate(
            {"results": [{"id": "b", "description": "Only the second"}]}
        )
        first, second = format_poi_results(pois, descriptions).split("\n---\n")
        assert first.endswith("Description: No description found")
        assert second.endswith("Description: Only the second")


class TestVideoResults:
    def _video(self, **video) -> VideoResult:
        return VideoResult.model_validate({
            "title": "Cats",
            "url": "https://v.test/cats",
            "description": "Cat video",
            "age": "1 day ago",
            "video": {"duration": "03:10", "views": 1000, "creator": "Cat Channel", **video},
        })

    def test_fixed_fields(self):
        text = format_video_results([self._video()])
        assert text == (
            "Title: Cats\n"
            "URL: https://v.test/cats\n"
            "Description: Cat video\n"
            "Age: 1 day ago\n"
            "Duration: 03:10\n"
            "Views: 1000\n"
            "Creator: Cat Channel"
        )

    def test_subscription_false_without_tags(self):
        text = format_video_results([self._video(requires_subscription=False)])
        assert "No subscription" in text
        assert "Requires subscription" not in text
        assert "Tags:" not in text

    def test_subscription_true(self):
        text = format_video_results([self._video(requires_subscription=True)])
        assert "Requires subscription" in text
        assert "No subscription" not in text

    def test_subscription_absent(self):
        text = format_video_results([self._video()])
        assert "subscription" not in text.lower()

    def test_tags(self):
        text = format_video_results([self._video(tags=["cats", "funny"])])
        assert text.endswith("Tags: cats, funny")

    def test_empty_tags_omitted(self):
        assert "Tags:" not in format_video_results([self._video(tags=[])])

    def test_blocks_separated(self):
        text = format_video_results([self._video(), self._video()])
        assert text.count("\n---\n") == 1
