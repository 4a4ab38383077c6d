# app/services/placeholder.py
from __future__ import annotations

import io
import logging
import random
import threading
import time
from concurrent.futures import Future
from functools import lru_cache
from typing import Dict, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from ..core.cache import Clock, TTLCache
from ..core.errors import RenderFailureError
from .validation import parse_dimension

logger = logging.getLogger(__name__)

MAX_DIMENSION = 2000
DEFAULT_TTL_SECONDS = 3600
DEFAULT_QUALITY = 80

PALETTE: Tuple[str, ...] = (
    "#FF5733", "#33FF57", "#3357FF", "#FF33F5",
    "#33FFF5", "#F5FF33", "#FF3333", "#33FF33",
)

LABELS: Tuple[str, ...] = (
    "Apartment", "Room", "Studio", "Flat",
    "Home", "House", "Rental", "Available",
)

Key = Tuple[int, int]
Dimension = Union[int, float, str]


@lru_cache(maxsize=64)
def _font(path: str, size: int) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(path, size)
    except OSError:
        # font file not on this host; Pillow ships a scalable default
        return ImageFont.load_default(size=size)


class PlaceholderRenderer:
    """
    Draws a decorative placeholder: palette background, a centered label and
    a smaller "WxH" caption below it, encoded as progressive JPEG.

    Pass a seeded `random.Random` to make color/label choice reproducible.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        palette: Sequence[str] = PALETTE,
        labels: Sequence[str] = LABELS,
        quality: int = DEFAULT_QUALITY,
        font_path: str = "DejaVuSans.ttf",
    ):
        if not palette or not labels:
            raise ValueError("palette and labels must be non-empty")
        self._rng = rng or random.Random()
        self.palette = tuple(palette)
        self.labels = tuple(labels)
        self.quality = quality
        self.font_path = font_path

    def render(self, width: int, height: int) -> bytes:
        try:
            background = self._rng.choice(self.palette)
            label = self._rng.choice(self.labels)

            # 10% of the smaller side for the label, half that for the caption
            label_size = max(1, round(min(width, height) * 0.1))
            caption_size = max(1, round(label_size * 0.5))

            img = Image.new("RGB", (width, height), background)
            draw = ImageDraw.Draw(img)
            cx = width / 2
            draw.text((cx, height * 0.5), label, fill="white",
                      font=_font(self.font_path, label_size), anchor="mm")
            draw.text((cx, height * 0.7), f"{width}x{height}", fill="white",
                      font=_font(self.font_path, caption_size), anchor="mm")

            buf = io.BytesIO()
            img.save(buf, format="JPEG", quality=self.quality, progressive=True)
            return buf.getvalue()
        except (OSError, ValueError) as e:
            raise RenderFailureError(f"failed to render {width}x{height} placeholder: {e}") from e


class PlaceholderCache:
    """
    Render-once cache of placeholder images keyed by (width, height).

    Hits within the TTL return the stored bytes untouched. Concurrent misses
    for the same key share a single render; misses for different keys render
    in parallel since the lock is never held while drawing.
    """

    def __init__(
        self,
        renderer: PlaceholderRenderer,
        *,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_items: int = 512,
        max_dimension: int = MAX_DIMENSION,
        clock: Clock = time.monotonic,
    ):
        self.renderer = renderer
        self.max_dimension = max_dimension
        self._cache = TTLCache(ttl_seconds=ttl_seconds, max_items=max_items, clock=clock)
        self._lock = threading.Lock()
        self._in_flight: Dict[Key, "Future[bytes]"] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._cache.ttl

    def get_or_render(self, width: Dimension, height: Dimension) -> bytes:
        key: Key = (
            parse_dimension(width, self.max_dimension),
            parse_dimension(height, self.max_dimension),
        )

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached
            future = self._in_flight.get(key)
            leader = future is None
            if leader:
                future = Future()
                self._in_flight[key] = future

        if not leader:
            # raises RenderFailureError if the leader's render failed
            return future.result()

        logger.debug("placeholder miss %dx%d, rendering", *key)
        try:
            data = self.renderer.render(*key)
        except RenderFailureError as e:
            self._finish(key, future, error=e)
            raise
        except Exception as e:
            err = RenderFailureError(f"failed to render {key[0]}x{key[1]} placeholder: {e}")
            self._finish(key, future, error=err)
            raise err from e

        self._finish(key, future, data=data)
        return data

    def _finish(self, key: Key, future: "Future[bytes]", *, data: Optional[bytes] = None,
                error: Optional[BaseException] = None) -> None:
        with self._lock:
            if error is None:
                # store before dropping the in-flight slot so late callers hit
                self._cache.set(key, data)
            self._in_flight.pop(key, None)
        if error is None:
            future.set_result(data)
        else:
            future.set_exception(error)

    def stats(self) -> dict:
        with self._lock:
            in_flight = len(self._in_flight)
        return {
            "items": len(self._cache),
            "max_items": self._cache.max_items,
            "ttl_seconds": self._cache.ttl,
            "in_flight": in_flight,
        }
