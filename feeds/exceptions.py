"""Exceptions raised while retrieving GeoJSON feeds."""

from typing import Optional


class FeedError(Exception):
  """A GeoJSON source could not be retrieved or understood."""

  def __init__(self, url: str, message: str, cause: Optional[BaseException] = None):
    super().__init__(f"{message} ({url})")
    self.url = url
    self.cause = cause


class FeedHTTPError(FeedError):
  """Transport failure or non-2xx response."""


class FeedFormatError(FeedError):
  """Response body is not a GeoJSON FeatureCollection."""
