# run.py

import argparse
import sys
from typing import List, Optional

from src.utils.config_loader import load_config, ConfigError
from src.utils.logger import setup_logger
from src.tvdb.connector import TvdbConnector
from src.loading.loader import FanartLoader
from src.gallery.viewer import FanartViewer

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch and preview the fan art of a TV series")
    parser.add_argument("series_id", type=int, help="Series id on the metadata service")
    parser.add_argument("--vignettes", action="store_true", help="Also download the vignettes")
    parser.add_argument("--no-thumbs", action="store_true", help="Skip the thumbnails")
    parser.add_argument("--workers", type=int, help="Number of parallel downloads")
    parser.add_argument("--config", help="Path to config.json")
    parser.add_argument("--verbose", action="store_true", help="Show debug output")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logger(verbose=args.verbose)

    try:
        logger.info("Loading configuration...")
        config = load_config(args.config)
        logger.info("Configuration loaded successfully!")

        if args.workers is not None:
            if args.workers < 1:
                raise ConfigError("\n--workers must be at least 1")
            config['loading']['max_workers'] = args.workers

        tvdb = TvdbConnector(config['tvdb'], logger)
        if not tvdb.test_connection():
            logger.error("Failed to establish connection to the metadata service")
            return 1

        fanart = tvdb.get_fanart(args.series_id)
        if not fanart:
            logger.info(f"No fan art found for series {args.series_id}")
            FanartViewer(logger).show(fanart, args.series_id)
            return 0

        loader = FanartLoader(config['loading'], logger)
        loader.load_all(fanart, thumbs=not args.no_thumbs, vignettes=args.vignettes)

        FanartViewer(logger).show(fanart, args.series_id)
        return 0

    except ConfigError as e:
        logger.error(f"Configuration Error: {str(e)}")
        logger.info("Please update your configuration and try again.")
        return 1
    except Exception as e:
        logger.critical(f"An unexpected error occurred: {str(e)}", exc_info=True)
        return 1

if __name__ == "__main__":
    sys.exit(main())
