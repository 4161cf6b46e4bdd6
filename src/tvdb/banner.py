# src/tvdb/banner.py

import threading
from io import BytesIO
from typing import Callable, Optional

import requests
from PIL import Image

from .links import TvdbLinks
from .models import TvdbLanguage
from ..utils.logger import get_logger

logger = get_logger("banner")

class ImageSlot:
    """
    One lazily loaded image together with its loaded/loading state.

    Every slot owns its own lock, so loading one image of a banner never
    blocks loading another one. The fetch runs while the lock is held:
    at most one download per slot is in flight and concurrent callers
    wait for it to finish.
    """

    def __init__(self, name: str):
        self.name = name
        self.image: Optional[Image.Image] = None
        self.loaded = False
        self.loading = False
        self._lock = threading.Lock()

    def load(self, path: Optional[str], fetch: Callable[[str], Optional[Image.Image]],
             replace_existing: bool = False) -> bool:
        if self.loaded and not replace_existing:
            return False

        with self._lock:
            # Another thread may have loaded the image while we were waiting
            if self.loaded and not replace_existing:
                return False

            self.loading = True
            try:
                image = None
                if path is not None:
                    try:
                        image = fetch(path)
                    except requests.RequestException as e:
                        logger.error(f"Couldn't load {self.name} {path}: {str(e)}")

                if image is not None:
                    self.image = image
                    self.loaded = True
                    return True

                self.loaded = False
                return False
            finally:
                self.loading = False

    def set(self, image: Optional[Image.Image]) -> bool:
        """Store an image fetched by the caller, no locking involved"""
        if image is not None:
            self.image = image
            self.loaded = True
            return True

        self.loaded = False
        return False

class TvdbBanner:
    """Generic artwork record of the metadata service"""

    def __init__(self, id: Optional[int] = None, banner_path: Optional[str] = None,
                 language: Optional[TvdbLanguage] = None, *,
                 session: Optional[requests.Session] = None,
                 links: Optional[TvdbLinks] = None,
                 timeout: Optional[float] = None):
        self.id = id
        self.banner_path = banner_path
        self.language = language
        self.series_id: Optional[int] = None
        self.rating: Optional[float] = None
        self.rating_count = 0

        self.session = session
        self.links = links if links is not None else TvdbLinks()
        self.timeout = timeout

        self._banner = ImageSlot("banner")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, banner_path={self.banner_path!r})"

    def load_image(self, url: str) -> Optional[Image.Image]:
        """
        Download and decode an image.

        Raises requests.RequestException on transport errors and on error
        status codes. Returns None when the body is not a readable image.
        """
        http = self.session if self.session is not None else requests
        response = http.get(url, timeout=self.timeout)
        response.raise_for_status()

        try:
            image = Image.open(BytesIO(response.content))
            image.load()
        except (OSError, Image.DecompressionBombError) as e:
            logger.warning(f"Couldn't decode image from {url}: {str(e)}")
            return None
        return image

    def _fetch(self, path: str) -> Optional[Image.Image]:
        return self.load_image(self.links.create_banner_link(path))

    @property
    def banner_image(self) -> Optional[Image.Image]:
        return self._banner.image

    @property
    def is_loaded(self) -> bool:
        return self._banner.loaded

    @property
    def banner_loading(self) -> bool:
        return self._banner.loading

    @banner_loading.setter
    def banner_loading(self, value: bool) -> None:
        self._banner.loading = value

    def load_banner(self, replace_existing: bool = False) -> bool:
        """Load the banner image from the service"""
        return self._banner.load(self.banner_path, self._fetch, replace_existing)

    def load_banner_from_image(self, image: Optional[Image.Image]) -> bool:
        return self._banner.set(image)
