"""
Data models for the Movie Catalog.
Defines the immutable records shared by the loader, the search engine and the API.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # frozen records with generated __init__/__eq__
# Read-only view over a dict so the id index cannot be mutated after construction
from types import MappingProxyType  # immutable mapping proxy
# Import typing helpers for precise and self-documenting types
from typing import Iterable, Mapping, Optional, Tuple  # sequences, mappings and optional values


class MovieDataError(ValueError):
	"""Raised when raw movie records cannot be turned into valid Movie objects."""


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie exactly as it appears in the catalog.
	Instances are immutable so they can be shared freely between concurrent readers.
	"""
	id: int  # unique, positive identifier
	name: str  # display title (never empty)
	director: str  # director's name as stored in the source
	year: int  # release year (e.g., 1994)
	genre: str  # free-form genre label, may contain '/' (e.g., "Crime/Drama")
	description: str  # short synopsis
	duration_minutes: int  # running time in minutes (positive)
	rating: float  # IMDb-style rating on a 0-10 scale


@dataclass(frozen=True)
class Catalog:
	"""
	The ordered collection of all movies plus an id -> Movie index built once.
	The index is always derived from `movies` in __post_init__, never passed in.
	"""
	movies: Tuple[Movie, ...] = ()  # source order, preserved in unfiltered listings
	by_id: Mapping[int, Movie] = field(init=False, repr=False, compare=False)  # read-only id index

	def __post_init__(self):
		ordered = tuple(self.movies)  # freeze the source order
		index = {}
		for movie in ordered:
			if movie.id in index:
				raise MovieDataError(f"Duplicate movie id {movie.id}")
			index[movie.id] = movie
		# frozen dataclass: assign through object.__setattr__
		object.__setattr__(self, "movies", ordered)
		object.__setattr__(self, "by_id", MappingProxyType(index))

	@classmethod
	def from_movies(cls, movies: Iterable[Movie]) -> 'Catalog':
		"""Build a catalog from any iterable of movies; duplicate ids are rejected."""
		return cls(movies=tuple(movies))

	def __len__(self) -> int:
		return len(self.movies)


@dataclass(frozen=True)
class LoadResult:
	"""
	Outcome of loading a catalog source.
	On failure `movies` is empty and `error` explains what went wrong; nothing is raised.
	"""
	movies: Tuple[Movie, ...]  # parsed movies in source order
	error: Optional[str] = None  # failure description, None on success

	@property
	def ok(self) -> bool:
		return self.error is None


@dataclass(frozen=True)
class SearchCriteria:
	"""
	Normalized search filters. Each dimension is either a usable value or None (no criterion).
	Text criteria are already trimmed and lowercased.
	"""
	name: Optional[str] = None  # lowercase substring to look for in movie names
	movie_id: Optional[int] = None  # exact id to match
	genre: Optional[str] = None  # lowercase full genre string to match exactly

	@classmethod
	def build(cls, name: Optional[str] = None, movie_id: Optional[int] = None, genre: Optional[str] = None) -> 'SearchCriteria':
		"""Trim and lowercase text filters; blank strings become 'no criterion'."""
		return cls(
			name=_normalize_criterion(name),
			movie_id=movie_id,
			genre=_normalize_criterion(genre),
		)

	@property
	def is_empty(self) -> bool:
		return self.name is None and self.movie_id is None and self.genre is None


def _normalize_criterion(value: Optional[str]) -> Optional[str]:
	if value is None:
		return None
	cleaned = value.strip().lower()
	return cleaned or None
