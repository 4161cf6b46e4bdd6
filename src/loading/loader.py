# src/loading/loader.py

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Tuple

from tqdm import tqdm

from ..tvdb.fanart import TvdbFanartBanner

class FanartLoader:
    def __init__(self, config: dict, logger: logging.Logger):
        """
        Load fan art images in parallel

        Args:
            config: The 'loading' configuration section
            logger: Logger instance
        """
        self.logger = logger
        self.max_workers = int(config.get('max_workers', 4))

    def _load_one(self, banner: TvdbFanartBanner, kind: str, replace_existing: bool) -> str:
        if kind == 'thumb':
            if banner.load_thumb(replace_existing):
                return 'loaded'
            return 'skipped' if banner.is_thumb_loaded else 'failed'

        if banner.load_vignette(replace_existing):
            return 'loaded'
        return 'skipped' if banner.is_vignette_loaded else 'failed'

    def load_all(self, banners: List[TvdbFanartBanner], thumbs: bool = True,
                 vignettes: bool = False, replace_existing: bool = False) -> Dict[str, int]:
        """Load the requested images of every banner and count the outcomes"""
        stats = {'loaded': 0, 'skipped': 0, 'failed': 0}

        jobs: List[Tuple[TvdbFanartBanner, str]] = []
        for banner in banners:
            if thumbs:
                jobs.append((banner, 'thumb'))
            if vignettes:
                jobs.append((banner, 'vignette'))

        if not jobs:
            return stats

        self.logger.info(f"Loading {len(jobs)} images with {self.max_workers} workers")

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self._load_one, banner, kind, replace_existing): (banner, kind)
                for banner, kind in jobs
            }
            with tqdm(total=len(futures), desc="Loading fan art", unit="image") as pbar:
                for future in as_completed(futures):
                    banner, kind = futures[future]
                    try:
                        outcome = future.result()
                    except Exception as e:
                        self.logger.error(f"Error loading {kind} of fan art {banner.id}: {str(e)}")
                        outcome = 'failed'
                    stats[outcome] += 1
                    if outcome == 'failed':
                        self.logger.debug(f"No {kind} for fan art {banner.id}")
                    pbar.update(1)

        self.logger.info(
            f"Images loaded: {stats['loaded']}, skipped: {stats['skipped']}, failed: {stats['failed']}"
        )
        return stats
