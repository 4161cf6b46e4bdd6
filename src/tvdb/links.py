# src/tvdb/links.py

from typing import Optional

DEFAULT_BASE_SERVER = "https://thetvdb.com"

class TvdbLinks:
    """Builds fully-qualified urls for the metadata service"""

    def __init__(self, base_server: str = DEFAULT_BASE_SERVER, api_key: Optional[str] = None):
        self.base_server = base_server.rstrip('/')
        self.api_key = api_key

    def create_banner_link(self, banner_path: str) -> str:
        """Url of a banner image given its relative path"""
        return f"{self.base_server}/banners/{banner_path.lstrip('/')}"

    def create_banners_link(self, series_id: int) -> str:
        """Url of the banner listing of a series"""
        if not self.api_key:
            raise ValueError("An API key is required to list banners")
        return f"{self.base_server}/api/{self.api_key}/series/{series_id}/banners.xml"
