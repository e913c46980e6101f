"""
Runtime configuration.

Settings are read from environment variables once, when this module is first
imported, so set them before starting the API or the UI.
"""

import os  # environment lookups
from dataclasses import dataclass  # plain settings container
from pathlib import Path  # resolve the bundled data file

# Bundled catalog, shipped inside the package so installed wheels find it too
DEFAULT_DATA_PATH = Path(__file__).resolve().parent / 'data' / 'movies.json'


@dataclass
class Settings:
	"""Application settings loaded from environment variables."""

	data_path: str = os.getenv('MOVIE_DATA_PATH', str(DEFAULT_DATA_PATH))  # catalog source file
	log_level: str = os.getenv('LOG_LEVEL', 'INFO')  # loguru sink level
	max_name_length: int = int(os.getenv('MAX_NAME_LENGTH', '100'))  # longest accepted name filter
	max_genre_length: int = int(os.getenv('MAX_GENRE_LENGTH', '50'))  # longest accepted genre filter
	api_url: str = os.getenv('MOVIE_API_URL', 'http://localhost:8000')  # where the UI looks for the API


settings = Settings()
