"""Pydantic models for Brave Search API responses."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class SafeSearch(str, enum.Enum):
    OFF = "off"
    MODERATE = "moderate"
    STRICT = "strict"


class BraveModel(BaseModel):
    """Base for API payloads: unknown fields ignored, aliases or names accepted."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# --- Web search ---


class WebResult(BraveModel):
    title: str = ""
    url: str = ""
    description: str = ""


class WebResults(BraveModel):
    results: list[WebResult] = Field(default_factory=list)


class LocationResult(BraveModel):
    id: str
    title: str = ""


class LocationResults(BraveModel):
    results: list[LocationResult] = Field(default_factory=list)


class WebSearchResponse(BraveModel):
    web: WebResults | None = None
    locations: LocationResults | None = None


# --- Image search ---


class ImageProperties(BraveModel):
    url: str


class ImageResult(BraveModel):
    title: str = ""
    url: str = ""
    properties: ImageProperties


class ImageSearchResponse(BraveModel):
    results: list[ImageResult] = Field(default_factory=list)


# --- News search ---


class NewsResult(BraveModel):
    title: str = ""
    url: str = ""
    description: str = ""
    age: str | None = None


class NewsSearchResponse(BraveModel):
    results: list[NewsResult] = Field(default_factory=list)


# --- Video search ---


class VideoData(BraveModel):
    duration: str | None = None
    views: int | str | None = None
    creator: str | None = None
    # None means the provider did not send the field, which renders
    # differently from an explicit False.
    requires_subscription: bool | None = None
    tags: list[str] | None = None


class VideoResult(BraveModel):
    title: str = ""
    url: str = ""
    description: str = ""
    age: str | None = None
    video: VideoData = Field(default_factory=VideoData)


class VideoSearchResponse(BraveModel):
    results: list[VideoResult] = Field(default_factory=list)


# --- Local search ---


class PostalAddress(BraveModel):
    display_address: str = Field(default="", alias="displayAddress")


class Contact(BraveModel):
    telephone: str | None = None
    email: str | None = None


class Rating(BraveModel):
    rating_value: float | None = Field(default=None, alias="ratingValue")
    review_count: int | None = Field(default=None, alias="reviewCount")


class DayHours(BraveModel):
    abbr_name: str = ""
    full_name: str = ""
    opens: str = ""
    closes: str = ""


class OpeningHours(BraveModel):
    current_day: list[DayHours] = Field(default_factory=list)
    days: list[list[DayHours]] = Field(default_factory=list)


class PoiRecord(BraveModel):
    # The pois endpoint does not echo ids back; LocalSearchTool fills this in.
    id: str | None = None
    title: str = ""
    serves_cuisine: list[str] | None = None
    postal_address: PostalAddress = Field(default_factory=PostalAddress)
    contact: Contact | None = None
    price_range: str | None = None
    rating: Rating | None = None
    opening_hours: OpeningHours | None = None


class LocalPoiResponse(BraveModel):
    results: list[PoiRecord] = Field(default_factory=list)


class LocalDescription(BraveModel):
    id: str
    description: str = ""


class LocalDescriptionsResponse(BraveModel):
    type: str = "local_descriptions"
    results: list[LocalDescription] = Field(default_factory=list)
