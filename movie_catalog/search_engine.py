"""
Search engine module.
Answers lookup, filter and genre queries against an immutable Catalog.
"""

from typing import Any, List, Optional  # type annotations for clarity

# Import project modules for data structures
from .models import Catalog, Movie, SearchCriteria  # core data classes

# Import loguru for console logging
from loguru import logger  # simple structured logger


class MovieSearchEngine:
	"""
	High-level read API over the catalog: list, lookup by id, filtered search and genres.
	The catalog is fixed at construction, so concurrent callers never need locking.
	"""
	def __init__(self, catalog: Catalog):
		# Keep the immutable catalog; its tuple and id index are never replaced
		self._catalog = catalog  # ordered movies + id index
		# Genres never change, so compute the sorted distinct list once
		self._genres = tuple(sorted({m.genre for m in catalog.movies}))  # verbatim, case-sensitive
		logger.info(f"[Engine] Ready with {len(catalog)} movies and {len(self._genres)} genres")

	@property
	def catalog(self) -> Catalog:
		return self._catalog

	def get_all(self) -> List[Movie]:
		"""Return every movie in load order."""
		return list(self._catalog.movies)  # fresh list so callers cannot disturb the catalog

	def get_by_id(self, movie_id: Any) -> Optional[Movie]:
		"""Return the movie with exactly this id, or None when the id is invalid or unknown."""
		if not _is_valid_id(movie_id):  # None, non-integers and ids <= 0 never reach the index
			logger.debug(f"[Engine] Rejected invalid movie id: {movie_id!r}")
			return None
		return self._catalog.by_id.get(movie_id)

	def search(self, name: Optional[str] = None, movie_id: Optional[int] = None, genre: Optional[str] = None) -> List[Movie]:
		"""
		Return movies matching ALL supplied criteria, in catalog order.
		- name: case-insensitive substring of the movie name (trimmed; blank means no filter)
		- movie_id: exact id
		- genre: case-insensitive exact match on the whole genre string (trimmed; blank means no filter)
		"""
		logger.info(f"[Engine] Search | name={name!r} id={movie_id!r} genre={genre!r}")
		criteria = SearchCriteria.build(name=name, movie_id=movie_id, genre=genre)  # normalize once

		if criteria.is_empty:
			results = self.get_all()  # nothing to filter on
		else:
			results = [m for m in self._catalog.movies if self._matches(m, criteria)]

		logger.info(f"[Engine] Search complete | {len(results)} of {len(self._catalog)} movies matched")
		return results

	def _matches(self, movie: Movie, criteria: SearchCriteria) -> bool:
		# Exact id first: cheapest check and the most selective one.
		# Ids get_by_id would reject (True, 0, negatives) match nothing here either
		if criteria.movie_id is not None and (not _is_valid_id(criteria.movie_id) or movie.id != criteria.movie_id):
			return False
		# Partial, case-insensitive title match
		if criteria.name is not None and criteria.name not in movie.name.lower():
			return False
		# Whole-string genre match: "crime" must not match "Crime/Drama"
		if criteria.genre is not None and movie.genre.lower() != criteria.genre:
			return False
		return True

	def get_all_genres(self) -> List[str]:
		"""Return the distinct genres present in the catalog, sorted ascending."""
		return list(self._genres)


def _is_valid_id(movie_id: Any) -> bool:
	# bool is an int subclass; True must not be treated as id 1
	return isinstance(movie_id, int) and not isinstance(movie_id, bool) and movie_id > 0
