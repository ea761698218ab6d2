"""HTTP client for the earthquake and plate-boundary GeoJSON sources."""

import logging
from typing import Any, Dict, Optional

import requests
import streamlit as st

from config.settings import settings
from .exceptions import FeedFormatError, FeedHTTPError

logger = logging.getLogger("quake_map.feeds.client")


def _validate_collection(url: str, payload: Any) -> Dict[str, Any]:
  """Reject anything that is not a FeatureCollection with a features list."""
  if not isinstance(payload, dict):
    raise FeedFormatError(url, "Expected a JSON object")

  if payload.get("type") != "FeatureCollection":
    raise FeedFormatError(url, f"Expected a FeatureCollection, got {payload.get('type')!r}")

  if not isinstance(payload.get("features"), list):
    raise FeedFormatError(url, "FeatureCollection has no features list")

  return payload


def fetch_geojson(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
  """
  Fetch a GeoJSON FeatureCollection.

  Args:
      url: Endpoint returning GeoJSON
      session: Optional requests session; a private one is used otherwise
      timeout: Request timeout in seconds (defaults to settings)

  Returns:
      The decoded FeatureCollection

  Raises:
      FeedHTTPError: on connection errors, timeouts and non-2xx responses
      FeedFormatError: when the body is not JSON or not a FeatureCollection
  """
  if timeout is None:
    timeout = settings.feeds.timeout_seconds

  close_session = False
  if session is None:
    session = requests.Session()
    close_session = True

  try:
    logger.debug(f"GET {url}")
    try:
      response = session.get(url, timeout=timeout)
      response.raise_for_status()
    except requests.RequestException as e:
      raise FeedHTTPError(url, f"Request failed: {e}", cause=e) from e

    try:
      payload = response.json()
    except ValueError as e:
      raise FeedFormatError(url, "Response body is not valid JSON", cause=e) from e

    collection = _validate_collection(url, payload)
    logger.info(f"Fetched {len(collection['features'])} features from {url}")
    return collection
  finally:
    if close_session:
      session.close()


@st.cache_data(ttl=settings.cache_ttl_seconds, show_spinner=False)
def fetch_geojson_cached(url: str) -> Dict[str, Any]:
  """Cached `fetch_geojson`. Failures raise and are therefore not cached."""
  return fetch_geojson(url)
