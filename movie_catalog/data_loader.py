"""
Data loading module.
Reads the bundled JSON movie file and turns each record into a validated Movie.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # parse the JSON array
from typing import Any, Dict, List, Sequence, Union  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our data classes used across the project
from .models import Catalog, LoadResult, Movie, MovieDataError  # structured records

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and validating movie data.
	A malformed record aborts the whole load: the catalog is either complete or empty.
	"""

	# Source field name -> (Movie attribute, accepted Python types)
	FIELDS = (
		('id', 'id', (int,)),
		('movieName', 'name', (str,)),
		('director', 'director', (str,)),
		('year', 'year', (int,)),
		('genre', 'genre', (str,)),
		('description', 'description', (str,)),
		('duration', 'duration_minutes', (int,)),
		('imdbRating', 'rating', (int, float)),
	)

	def load_movies_from_json(self, filepath: Union[str, Path]) -> LoadResult:
		"""
		Load movies from a JSON file holding an array of movie objects.
		Never raises: any failure is logged and reported through LoadResult.error
		together with an empty movie tuple.
		"""
		filepath = Path(filepath)  # normalize path
		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		try:
			with open(filepath, 'r', encoding='utf-8') as f:
				records = json.load(f)  # whole file is one JSON array
			movies = self.parse_records(records)  # validate every record or fail
		except FileNotFoundError:
			return self._failed(f"Movie data file not found: {filepath}")
		except (OSError, UnicodeDecodeError) as e:
			return self._failed(f"Movie data file could not be read: {filepath}: {e}")
		except json.JSONDecodeError as e:
			return self._failed(f"Invalid JSON in {filepath}: {e}")
		except MovieDataError as e:
			return self._failed(f"Invalid movie data in {filepath}: {e}")
		except (ValueError, RecursionError) as e:
			# valid JSON that Python still refuses: oversized integers, very deep nesting
			return self._failed(f"Invalid JSON in {filepath}: {e}")

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return LoadResult(movies=tuple(movies))

	def load_catalog(self, filepath: Union[str, Path]) -> Catalog:
		"""Load a file straight into an immutable Catalog (empty when loading failed)."""
		result = self.load_movies_from_json(filepath)
		return Catalog.from_movies(result.movies)

	def parse_records(self, records: Any) -> List[Movie]:
		"""
		Convert a raw JSON array into Movie objects.
		Raises MovieDataError on the first invalid record or on a duplicate id.
		"""
		if not isinstance(records, list):  # top level must be an array
			raise MovieDataError(f"expected a JSON array of movies, got {type(records).__name__}")

		movies = []  # accumulator for parsed Movie objects
		seen_ids = set()  # ids already used, to keep them unique
		for position, data in enumerate(records):
			movie = self._parse_movie_data(data, position)  # convert dict -> Movie
			if movie.id in seen_ids:
				raise MovieDataError(f"record {position}: duplicate id {movie.id}")
			seen_ids.add(movie.id)
			movies.append(movie)
		return movies

	def _parse_movie_data(self, data: Any, position: int) -> Movie:
		"""
		Convert a raw dictionary (from file) into a strongly-typed Movie object.
		Every field is required; no defaults are invented.
		"""
		if not isinstance(data, dict):
			raise MovieDataError(f"record {position}: expected an object, got {type(data).__name__}")

		values: Dict[str, Any] = {}
		for source_name, attribute, types in self.FIELDS:
			if source_name not in data or data[source_name] is None:
				raise MovieDataError(f"record {position}: missing field '{source_name}'")
			value = data[source_name]
			# bool is a subclass of int, but true/false is never a valid number here
			if isinstance(value, bool) or not isinstance(value, types):
				expected = ' or '.join(t.__name__ for t in types)
				raise MovieDataError(
					f"record {position}: field '{source_name}' must be {expected}, got {type(value).__name__}"
				)
			values[attribute] = value

		if values['id'] <= 0:
			raise MovieDataError(f"record {position}: id must be positive, got {values['id']}")
		if not values['name'].strip():
			raise MovieDataError(f"record {position}: movieName must not be empty")
		if values['duration_minutes'] <= 0:
			raise MovieDataError(f"record {position}: duration must be positive, got {values['duration_minutes']}")

		values['rating'] = float(values['rating'])  # integers like 9 become 9.0
		return Movie(**values)

	def _failed(self, message: str) -> LoadResult:
		logger.error(f"[DataLoader] Failed to load movies: {message}")  # recoverable: caller gets an empty catalog
		return LoadResult(movies=(), error=message)
