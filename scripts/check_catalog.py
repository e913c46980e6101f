"""
Validate the movie data file.

This script:
1) Loads the configured data file (MOVIE_DATA_PATH or movie_catalog/data/movies.json)
2) Builds the catalog and search engine
3) Reports movie count, genres and year range

Usage:
    python -m scripts.check_catalog [path/to/movies.json]

Exits with status 1 when the file cannot be loaded, so it can gate CI.
"""

import sys  # argv and exit status
import time  # measure load time

from loguru import logger  # console logging

from movie_catalog.config import settings  # default data path and log level
from movie_catalog.data_loader import DataLoader  # data ingestion
from movie_catalog.logging_config import setup_logging  # loguru sink setup
from movie_catalog.models import Catalog  # immutable catalog
from movie_catalog.search_engine import MovieSearchEngine  # catalog queries


def main(argv=None) -> int:
	argv = sys.argv[1:] if argv is None else argv
	setup_logging(settings.log_level)
	data_path = argv[0] if argv else settings.data_path  # explicit path wins

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Check Movie Catalog")
	logger.info("=" * 60)

	# 1) Load data
	logger.info(f"[1/3] Loading {data_path}...")
	t0 = time.time()  # start timer
	result = DataLoader().load_movies_from_json(data_path)  # read dataset
	if not result.ok:
		logger.error(f"[Check] Catalog is unusable: {result.error}")
		return 1
	logger.info(f"[OK] Loaded {len(result.movies)} movies in {(time.time() - t0) * 1000:.1f} ms")  # confirm count

	# 2) Build engine
	logger.info("[2/3] Building catalog index...")
	engine = MovieSearchEngine(Catalog.from_movies(result.movies))

	# 3) Report
	logger.info("[3/3] Catalog summary")
	movies = engine.get_all()
	genres = engine.get_all_genres()
	logger.info(f"  Movies: {len(movies)}")
	logger.info(f"  Genres ({len(genres)}): {', '.join(genres)}")
	if movies:
		logger.info(f"  Year range: {min(m.year for m in movies)} - {max(m.year for m in movies)}")
	logger.info("Catalog OK.")
	return 0


if __name__ == '__main__':
	sys.exit(main())
