"""Concurrent retrieval of both GeoJSON sources into their layer groups."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from config.settings import FeedConfig, settings
from visualization.layers import (
    EARTHQUAKES,
    FAULT_LINES,
    LayerGroup,
    load_earthquake_layer,
    load_plate_layer,
)
from .client import fetch_geojson
from .exceptions import FeedError

logger = logging.getLogger("quake_map.feeds.loader")

FetchFn = Callable[[str], Dict[str, Any]]


@dataclass
class FeedResult:
  """Outcome of one fetch: a collection or the error that prevented it."""
  name: str
  url: str
  collection: Optional[Dict[str, Any]] = None
  error: Optional[Exception] = None

  @property
  def ok(self) -> bool:
    return self.error is None and self.collection is not None


def _fetch_one(name: str, url: str, fetch: FetchFn) -> FeedResult:
  try:
    return FeedResult(name=name, url=url, collection=fetch(url))
  except FeedError as e:
    logger.warning(f"{name} feed unavailable: {e}")
    return FeedResult(name=name, url=url, error=e)
  except Exception as e:
    # Non-feed errors from a custom fetch
    logger.exception(f"Unexpected error loading {name} feed from {url}")
    return FeedResult(name=name, url=url, error=e)


def fetch_all(
    urls: Mapping[str, str],
    fetch: FetchFn = fetch_geojson,
    on_result: Optional[Callable[[FeedResult], None]] = None,
) -> Dict[str, FeedResult]:
  """
  Fetch several sources at once.

  Results are handed to `on_result` in completion order, not request order.

  Args:
      urls: Layer name -> endpoint
      fetch: Callable returning a FeatureCollection for a URL
      on_result: Called on the calling thread as each fetch finishes

  Returns:
      Layer name -> FeedResult, for every requested name
  """
  results: Dict[str, FeedResult] = {}
  if not urls:
    return results

  with ThreadPoolExecutor(max_workers=len(urls), thread_name_prefix="feed") as executor:
    futures = {
        executor.submit(_fetch_one, name, url, fetch): name
        for name, url in urls.items()
    }
    for future in as_completed(futures):
      result = future.result()
      results[result.name] = result
      if on_result is not None:
        on_result(result)

  return results


_LOADERS = {
    EARTHQUAKES: load_earthquake_layer,
    FAULT_LINES: load_plate_layer,
}


def load_layer_groups(
    feeds: Optional[FeedConfig] = None,
    fetch: FetchFn = fetch_geojson,
) -> Dict[str, LayerGroup]:
  """
  Fetch earthquakes and plate boundaries concurrently and fill their groups.

  A failed source leaves its group empty; nothing is raised.

  Args:
      feeds: Source configuration (defaults to settings.feeds)
      fetch: Callable returning a FeatureCollection for a URL

  Returns:
      {"Earthquakes": LayerGroup, "Fault Lines": LayerGroup}
  """
  feeds = feeds or settings.feeds
  groups = {name: LayerGroup(name=name) for name in _LOADERS}

  def populate(result: FeedResult) -> None:
    if not result.ok:
      return
    try:
      _LOADERS[result.name](groups[result.name], result.collection)
    except Exception:
      logger.exception(f"Could not render {result.name} layer")

  fetch_all(
      {EARTHQUAKES: feeds.quake_url, FAULT_LINES: feeds.plates_url},
      fetch=fetch,
      on_result=populate,
  )

  return groups
