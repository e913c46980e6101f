"""
FastAPI server exposing the movie catalog.
Endpoints:
- GET /health: basic health check
- GET /movies: every movie plus the genre list
- GET /movies/genres: distinct genres, sorted
- GET /movies/{movie_id}: one movie or 404
- GET /api/movies/search?name=...&id=...&genre=...: filtered movies with a summary message

Startup loads the catalog file once; the engine is published only after it is fully built.
"""

# Import standard libraries for timing
import time  # measure startup latency
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, data loading and search
from movie_catalog.config import settings  # environment-driven settings
from movie_catalog.data_loader import DataLoader  # loads and validates movies
from movie_catalog.logging_config import setup_logging  # loguru sink setup
from movie_catalog.models import Catalog, Movie  # immutable catalog records
from movie_catalog.search_engine import MovieSearchEngine  # catalog queries

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Catalog API", version="1.0.0")  # web app

# Globals that hold the search engine instance and measured startup time
ENGINE: Optional[MovieSearchEngine] = None  # will point to the initialized engine
LOAD_ERROR: Optional[str] = None  # why the catalog is empty, if loading failed
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int  # unique id
	movieName: str  # title, same key as the data file
	director: str  # director name
	year: int  # release year
	genre: str  # full genre label
	description: str  # synopsis
	duration: int  # running time in minutes
	imdbRating: float  # rating on a 0-10 scale


class MovieListResponse(BaseModel):
	movies: List[MovieOut]  # movies in catalog order
	allGenres: List[str]  # genre choices for filtering


class SearchCriteriaOut(BaseModel):
	name: str  # echoed name filter ('' when absent)
	id: Optional[int] = None  # echoed id filter
	genre: str  # echoed genre filter ('' when absent)


class SearchResponse(BaseModel):
	movies: List[MovieOut]  # matching movies in catalog order
	totalResults: int  # len(movies)
	searchCriteria: SearchCriteriaOut  # what was asked for
	message: str  # human-readable summary


def movie_out(movie: Movie) -> MovieOut:
	"""Map a Movie back onto the field names used by the data file."""
	return MovieOut(
		id=movie.id,
		movieName=movie.name,
		director=movie.director,
		year=movie.year,
		genre=movie.genre,
		description=movie.description,
		duration=movie.duration_minutes,
		imdbRating=movie.rating,
	)


def describe_criteria(name: Optional[str], movie_id: Optional[int], genre: Optional[str]) -> str:
	"""Render the supplied filters as text, e.g. "name containing 'x' and genre 'Drama'"."""
	parts = []  # one phrase per supplied filter
	if name is not None and name.strip():
		parts.append(f"name containing '{name.strip()}'")
	if movie_id is not None:
		parts.append(f"ID {movie_id}")
	if genre is not None and genre.strip():
		parts.append(f"genre '{genre.strip()}'")
	return ' and '.join(parts) if parts else 'your criteria'


def get_engine() -> MovieSearchEngine:
	"""Return the engine or answer 503 while startup has not finished."""
	if ENGINE is None:
		logger.warning("[API] Request received but engine not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Catalog is not loaded yet")
	return ENGINE


# FastAPI startup hook to initialize the search engine once
@app.on_event("startup")
async def startup_event():
	"""Load the catalog, build the engine, then publish it."""
	global ENGINE, LOAD_ERROR, STARTUP_TIME_S  # refer to module-level globals
	setup_logging(settings.log_level)  # configure sinks before anything logs
	start = time.time()  # start timer for startup latency

	logger.info(f"[API] Startup: loading movies from {settings.data_path}")  # log intent

	result = DataLoader().load_movies_from_json(settings.data_path)  # never raises
	if not result.ok:
		logger.warning(f"[API] Serving an empty catalog: {result.error}")  # degraded but alive

	engine = MovieSearchEngine(Catalog.from_movies(result.movies))  # fully built before publishing
	LOAD_ERROR = result.error
	ENGINE = engine

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(result.movies)} movies.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"movie_count": len(ENGINE.catalog) if ENGINE is not None else 0,  # catalog size
		"load_error": LOAD_ERROR,  # None when the file loaded cleanly
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies", response_model=MovieListResponse)
async def list_movies():
	"""Return the whole catalog in load order together with all genres."""
	engine = get_engine()
	logger.info("[API] /movies")
	return MovieListResponse(
		movies=[movie_out(m) for m in engine.get_all()],
		allGenres=engine.get_all_genres(),
	)


@app.get("/movies/genres", response_model=List[str])
async def list_genres():
	"""Return the distinct genres, sorted."""
	return get_engine().get_all_genres()


@app.get("/movies/{movie_id}", response_model=MovieOut)
async def movie_details(movie_id: int):
	"""Return one movie; unknown and non-positive ids both answer 404."""
	logger.info(f"[API] /movies/{movie_id}")
	movie = get_engine().get_by_id(movie_id)
	if movie is None:
		logger.warning(f"[API] Movie with ID {movie_id} not found")
		raise HTTPException(status_code=404, detail=f"Movie with ID {movie_id} was not found.")
	return movie_out(movie)


# Main search endpoint that accepts optional name, id and genre filters
@app.get("/api/movies/search", response_model=SearchResponse)
async def search_movies(
	name: Optional[str] = Query(None, description="Part of the movie name (case-insensitive)"),
	movie_id: Optional[int] = Query(None, alias="id", description="Exact movie id"),
	genre: Optional[str] = Query(None, description="Full genre label (case-insensitive)"),
):
	"""Filter the catalog; all supplied filters must hold."""
	engine = get_engine()
	logger.debug(f"[API] /api/movies/search name={name!r} id={movie_id!r} genre={genre!r}")  # debug log of input

	# Reject oversized filters before touching the engine
	if name is not None and len(name.strip()) > settings.max_name_length:
		logger.warning("[API] Movie name filter too long")
		raise HTTPException(status_code=400, detail=f"Movie name too long (max {settings.max_name_length} characters)")
	if genre is not None and len(genre.strip()) > settings.max_genre_length:
		logger.warning("[API] Genre filter too long")
		raise HTTPException(status_code=400, detail=f"Genre too long (max {settings.max_genre_length} characters)")

	results = engine.search(name=name, movie_id=movie_id, genre=genre)  # run search
	criteria_text = describe_criteria(name, movie_id, genre)
	if results:
		message = f"Found {len(results)} movies matching {criteria_text}"
	else:
		message = f"No movies found matching {criteria_text}"
	logger.info(f"[API] /api/movies/search served {len(results)} results")  # summary

	return SearchResponse(
		movies=[movie_out(m) for m in results],
		totalResults=len(results),
		searchCriteria=SearchCriteriaOut(name=name or '', id=movie_id, genre=genre or ''),
		message=message,
	)
