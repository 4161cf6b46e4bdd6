# src/tvdb/connector.py

import logging
import time
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

import requests

from .banner import TvdbBanner
from .fanart import TvdbFanartBanner
from .links import TvdbLinks
from .models import TvdbLanguage, parse_colors, parse_resolution

class TvdbConnector:
    def __init__(self, config: dict, logger: logging.Logger):
        """
        Initialize the metadata service connector

        Args:
            config: Dictionary containing the 'tvdb' configuration section
            logger: Logger instance
        """
        self.logger = logger
        self.api_key = config['api_key']
        self.timeout = config.get('request_timeout', 30)
        self.links = TvdbLinks(config.get('base_server', 'https://thetvdb.com'), self.api_key)
        self.session = requests.Session()
        self.session.headers.update({'User-Agent': 'tvdb-fanart/0.1'})

        # Rate limiting
        self.last_request_time = 0.0
        self.min_request_interval = config.get('min_request_interval', 0.2)

        # Banner listings per series
        self.cache: Dict[int, Dict] = {}
        self.cache_timeout = config.get('cache_timeout', 3600)
        self.cache_max_size = config.get('cache_max_size', 100)

    def _handle_rate_limit(self) -> None:
        """Keep a minimum interval between requests to the service"""
        time_since_last = time.time() - self.last_request_time
        if time_since_last < self.min_request_interval:
            wait = self.min_request_interval - time_since_last
            self.logger.debug(f"Rate limiting, waiting {wait:.2f} seconds")
            time.sleep(wait)
        self.last_request_time = time.time()

    def _check_cache(self, series_id: int) -> Optional[List[TvdbBanner]]:
        """Check cache with expiry"""
        if series_id in self.cache:
            cache_entry = self.cache[series_id]
            if time.time() - cache_entry.get('time', 0) < self.cache_timeout:
                self.logger.debug(f"Cache hit for series: {series_id}")
                return cache_entry.get('data')
            del self.cache[series_id]
        return None

    def _update_cache(self, series_id: int, data: List[TvdbBanner]) -> None:
        self.cache[series_id] = {
            'time': time.time(),
            'data': data
        }
        self._cleanup_cache()

    def _cleanup_cache(self) -> None:
        """Remove oldest entries if cache exceeds max size"""
        if len(self.cache) > self.cache_max_size:
            sorted_cache = sorted(self.cache.items(),
                                  key=lambda x: x[1]['time'],
                                  reverse=True)
            self.cache = dict(sorted_cache[:self.cache_max_size])

    def _validate_banner_data(self, banner_data: Dict[str, str]) -> bool:
        """Validate required fields in banner data"""
        required_fields = ['id', 'BannerPath', 'BannerType']
        return all(banner_data.get(field) for field in required_fields)

    def _create_banner(self, banner_data: Dict[str, str], series_id: int) -> Optional[TvdbBanner]:
        """Create a banner object from one <Banner> element"""
        if not self._validate_banner_data(banner_data):
            self.logger.warning(f"Invalid banner data received: {banner_data}")
            return None

        try:
            banner_id = int(banner_data['id'])
        except ValueError:
            self.logger.warning(f"Invalid banner id: {banner_data['id']}")
            return None

        language = TvdbLanguage.from_abbreviation(banner_data.get('Language'))
        kwargs = {'session': self.session, 'links': self.links, 'timeout': self.timeout}

        if banner_data['BannerType'].lower() == 'fanart':
            banner = TvdbFanartBanner(banner_id, banner_data['BannerPath'], language, **kwargs)
            banner.thumb_path = banner_data.get('ThumbnailPath') or None
            banner.vignette_path = banner_data.get('VignettePath') or None
            try:
                banner.resolution = parse_resolution(banner_data.get('BannerType2', ''))
            except ValueError:
                self.logger.debug(f"No resolution for fan art {banner_id}")
            try:
                banner.colors = parse_colors(banner_data.get('Colors', ''))
            except ValueError as e:
                self.logger.warning(f"Ignoring colors of fan art {banner_id}: {str(e)}")
        else:
            banner = TvdbBanner(banner_id, banner_data['BannerPath'], language, **kwargs)

        banner.series_id = series_id
        try:
            banner.rating = float(banner_data['Rating']) if banner_data.get('Rating') else None
            banner.rating_count = int(banner_data.get('RatingCount') or 0)
        except ValueError:
            self.logger.debug(f"Invalid rating for banner {banner_id}")

        return banner

    def parse_banners(self, xml_text: str, series_id: int) -> List[TvdbBanner]:
        """Parse a banner listing document"""
        root = ET.fromstring(xml_text)
        banners = []
        for element in root.iter('Banner'):
            banner_data = {child.tag: (child.text or '').strip() for child in element}
            banner = self._create_banner(banner_data, series_id)
            if banner:
                banners.append(banner)
        return banners

    def get_banners(self, series_id: int) -> List[TvdbBanner]:
        """Fetch all banners of a series"""
        cached_result = self._check_cache(series_id)
        if cached_result is not None:
            return cached_result

        try:
            url = self.links.create_banners_link(series_id)
            self.logger.info(f"Fetching banners for series {series_id}")
            self._handle_rate_limit()

            start_time = time.time()
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            self.logger.debug(f"Banner listing fetched in {time.time() - start_time:.2f} seconds")

            banners = self.parse_banners(response.text, series_id)
        except requests.RequestException as e:
            self.logger.error(f"Error fetching banners for series {series_id}: {str(e)}")
            return []
        except ET.ParseError as e:
            self.logger.error(f"Invalid banner listing for series {series_id}: {str(e)}")
            return []

        self.logger.info(f"Found {len(banners)} banners for series {series_id}")
        self._update_cache(series_id, banners)
        return banners

    def get_fanart(self, series_id: int) -> List[TvdbFanartBanner]:
        """Fetch the fan art of a series, best rated first"""
        fanart = [b for b in self.get_banners(series_id) if isinstance(b, TvdbFanartBanner)]
        fanart.sort(key=lambda b: (b.rating or 0.0, b.rating_count), reverse=True)
        return fanart

    def test_connection(self) -> bool:
        """Test the connection to the service"""
        try:
            self._handle_rate_limit()
            response = self.session.get(self.links.base_server, timeout=self.timeout)
            response.raise_for_status()
            self.logger.info(f"Successfully connected to {self.links.base_server}")
            return True
        except requests.RequestException as e:
            self.logger.error(f"Connection test failed: {str(e)}")
            return False
