# src/tvdb/fanart.py

from typing import List, Optional

from PIL import Image

from .banner import ImageSlot, TvdbBanner
from .models import RgbColor, Resolution, TvdbLanguage

class TvdbFanartBanner(TvdbBanner):
    """
    Fan art is high quality artwork displayed in the background of media
    center menus, usually at 1920x1080 or 1280x720.

    Besides the full size image, the service publishes a small thumbnail
    and a vignette of the artwork. Both are downloaded on demand with
    load_thumb() and load_vignette() and kept in memory afterwards.
    """

    def __init__(self, id: Optional[int] = None, banner_path: Optional[str] = None,
                 language: Optional[TvdbLanguage] = None, **kwargs):
        super().__init__(id, banner_path, language, **kwargs)
        self.thumb_path: Optional[str] = None
        self.vignette_path: Optional[str] = None
        self.resolution: Optional[Resolution] = None
        self.color1: Optional[RgbColor] = None
        self.color2: Optional[RgbColor] = None
        self.color3: Optional[RgbColor] = None

        self._thumb = ImageSlot("banner thumb")
        self._vignette = ImageSlot("vignette")

    @property
    def colors(self) -> List[Optional[RgbColor]]:
        """
        Light accent, dark accent and neutral mid-tone, in that order.

        Positions are kept, so an unset color shows up as None while any
        other color is set. Empty when no color is set at all.
        """
        colors = [self.color1, self.color2, self.color3]
        if all(c is None for c in colors):
            return []
        return colors

    @colors.setter
    def colors(self, value: List[RgbColor]) -> None:
        value = list(value or [])
        if len(value) > 3:
            raise ValueError(f"Fan art has at most 3 colors, got {len(value)}")
        value += [None] * (3 - len(value))
        self.color1, self.color2, self.color3 = value

    @property
    def thumb_image(self) -> Optional[Image.Image]:
        return self._thumb.image

    @property
    def vignette_image(self) -> Optional[Image.Image]:
        return self._vignette.image

    @property
    def is_thumb_loaded(self) -> bool:
        return self._thumb.loaded

    @property
    def is_vignette_loaded(self) -> bool:
        return self._vignette.loaded

    @property
    def thumb_loading(self) -> bool:
        return self._thumb.loading

    @thumb_loading.setter
    def thumb_loading(self, value: bool) -> None:
        self._thumb.loading = value

    @property
    def vignette_loading(self) -> bool:
        return self._vignette.loading

    @vignette_loading.setter
    def vignette_loading(self, value: bool) -> None:
        self._vignette.loading = value

    def load_thumb(self, replace_existing: bool = False) -> bool:
        """
        Load the thumbnail from the service.

        Returns False without doing any work when the thumbnail is already
        loaded and replace_existing is not set. Transport errors are logged
        and reported as False.
        """
        return self._thumb.load(self.thumb_path, self._fetch, replace_existing)

    def load_thumb_from_image(self, image: Optional[Image.Image]) -> bool:
        """Use a thumbnail the caller already has"""
        return self._thumb.set(image)

    def load_vignette(self, replace_existing: bool = False) -> bool:
        """Load the vignette from the service, see load_thumb()"""
        return self._vignette.load(self.vignette_path, self._fetch, replace_existing)

    def load_vignette_from_image(self, image: Optional[Image.Image]) -> bool:
        return self._vignette.set(image)
