"""Render Brave API records as plain-text blocks for tool responses."""

from __future__ import annotations

from brave_search_mcp.brave.models import (
    DayHours,
    LocalDescriptionsResponse,
    LocalPoiResponse,
    NewsResult,
    OpeningHours,
    PoiRecord,
    VideoResult,
    WebResult,
)

BLOCK_SEPARATOR = "\n---\n"

NO_PHONE = "No phone number found"
NO_EMAIL = "No email found"
NO_PRICE_RANGE = "No price range found"
NO_OPENING_HOURS = "No opening hours found"
NO_DESCRIPTION = "No description found"
NOT_AVAILABLE = "N/A"


def format_web_results(results: list[WebResult]) -> str:
    return "\n\n".join(
        f"Title: {r.title}\nURL: {r.url}\nDescription: {r.description}" for r in results
    )


def format_news_results(results: list[NewsResult]) -> str:
    return "\n\n".join(
        f"Title: {r.title}\nURL: {r.url}\nAge: {r.age}\nDescription: {r.description}"
        for r in results
    )


def _format_range(day: DayHours) -> str:
    return f"{day.full_name} {day.opens} - {day.closes}"


def format_opening_hours(hours: OpeningHours) -> str:
    """Today's ranges on one line, then the weekly table, one day per line.

    Values are passed through as received; no timezone handling.
    """
    today = ", ".join(_format_range(day) for day in hours.current_day)
    weekly = "\n".join(
        ", ".join(_format_range(day) for day in slot) for slot in hours.days
    )
    return f"Today: {today}\nWeekly:\n{weekly}"


def _format_poi(poi: PoiRecord, description: str | None) -> str:
    contact = poi.contact
    rating = poi.rating
    # A zero rating means unrated.
    rating_value = rating.rating_value if rating and rating.rating_value else None
    review_count = rating.review_count if rating and rating.review_count is not None else None

    lines = [f"Name: {poi.title}"]
    if poi.serves_cuisine:
        lines.append(f"Cuisine: {', '.join(poi.serves_cuisine)}")
    lines += [
        f"Address: {poi.postal_address.display_address}",
        f"Phone: {(contact and contact.telephone) or NO_PHONE}",
        f"Email: {(contact and contact.email) or NO_EMAIL}",
        f"Price Range: {poi.price_range or NO_PRICE_RANGE}",
        f"Ratings: {rating_value if rating_value is not None else NOT_AVAILABLE} "
        f"({review_count if review_count is not None else NOT_AVAILABLE}) reviews",
        "Hours:",
        format_opening_hours(poi.opening_hours) if poi.opening_hours else NO_OPENING_HOURS,
        f"Description: {description if description is not None else NO_DESCRIPTION}",
    ]
    return "\n".join(lines)


def format_poi_results(
    pois: LocalPoiResponse, descriptions: LocalDescriptionsResponse
) -> str:
    """Join each POI with the description sharing its id and render them.

    POIs must already carry their ids; a POI without a matching description
    gets the placeholder text.
    """
    by_id: dict[str, str] = {}
    for d in descriptions.results:
        by_id.setdefault(d.id, d.description)
    return BLOCK_SEPARATOR.join(
        _format_poi(poi, by_id.get(poi.id) if poi.id is not None else None)
        for poi in pois.results
    )


def _format_video(video: VideoResult) -> str:
    data = video.video
    lines = [
        f"Title: {video.title}",
        f"URL: {video.url}",
        f"Description: {video.description}",
        f"Age: {video.age}",
        f"Duration: {data.duration}",
        f"Views: {data.views}",
        f"Creator: {data.creator}",
    ]
    if data.requires_subscription is not None:
        lines.append("Requires subscription" if data.requires_subscription else "No subscription")
    if data.tags:
        lines.append(f"Tags: {', '.join(data.tags)}")
    return "\n".join(lines)


def format_video_results(results: list[VideoResult]) -> str:
    return BLOCK_SEPARATOR.join(_format_video(v) for v in results)
