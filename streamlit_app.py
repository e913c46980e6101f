"""
Streamlit UI for the Movie Catalog.
Calls the local FastAPI server at http://localhost:8000 to fetch movies,
or runs locally by loading movie_catalog/data/movies.json like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import List, Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from movie_catalog.config import settings  # data path and API URL defaults
from movie_catalog.data_loader import DataLoader  # load movies from file
from movie_catalog.models import Catalog  # immutable catalog
from movie_catalog.search_engine import MovieSearchEngine  # run lookups and filters

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Catalog", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Catalog")  # friendly header

# Cache the local engine so we only read the data file once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[MovieSearchEngine]:
	"""Create a local MovieSearchEngine from the configured data file."""
	result = DataLoader().load_movies_from_json(settings.data_path)  # never raises
	if not result.ok:
		# Show an error in the UI so users know local mode has nothing to show
		st.error(f"Failed to load the movie catalog: {result.error}")
		return None  # signal failure
	return MovieSearchEngine(Catalog.from_movies(result.movies))  # success

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", settings.api_url)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[MovieSearchEngine] = None  # placeholder
if use_local or not api_available:
	local_engine = init_local_engine()  # load catalog once
	if local_engine is not None:
		st.sidebar.success("Local engine ready.")  # success note


def fetch_genres() -> List[str]:
	"""Genre choices for the dropdown, from whichever backend is active."""
	if local_engine is not None:
		return local_engine.get_all_genres()
	resp = requests.get(f"{api_url}/movies/genres", timeout=10)
	resp.raise_for_status()
	return resp.json()


# Filter row: name, id and genre, all optional
try:
	genre_choices = [""] + fetch_genres()  # blank entry means "any genre"
except requests.RequestException as e:
	st.error(f"Could not fetch genres: {e}")
	genre_choices = [""]

col1, col2, col3 = st.columns([3, 1, 2])  # grid with ratio 3:1:2
with col1:
	name = st.text_input("Movie name contains", placeholder="e.g., prison")
with col2:
	movie_id = st.number_input("Movie ID", min_value=0, step=1, value=0, help="0 means any id")
with col3:
	genre = st.selectbox("Genre", genre_choices)

# Run the search on every rerun; with no filters this lists the whole catalog
try:
	if local_engine is not None:
		# Local mode: run the query inside this process
		movies = local_engine.search(name=name, movie_id=int(movie_id) or None, genre=genre)
		rows = [
			{
				"id": m.id,
				"movieName": m.name,
				"director": m.director,
				"year": m.year,
				"genre": m.genre,
				"description": m.description,
				"duration": m.duration_minutes,
				"imdbRating": m.rating,
			}
			for m in movies
		]
	else:
		# API mode: call the server and let it perform the search
		params = {"name": name, "genre": genre}  # blank values are ignored by the engine
		if movie_id:
			params["id"] = int(movie_id)
		resp = requests.get(f"{api_url}/api/movies/search", params=params, timeout=10)
		if resp.status_code == 400:
			st.warning(resp.json().get("detail", "Invalid search"))  # oversized filter
			rows = []
		else:
			resp.raise_for_status()  # raise error if server responded with an error code
			rows = resp.json()["movies"]  # parse JSON returned by API

	st.success(f"{len(rows)} movies")  # result count
	st.divider()  # visual separator

	# Render each movie as a short card
	for row in rows:
		st.subheader(f"{row['movieName']} ({row['year']})")  # title + year
		st.caption(f"#{row['id']} | {row['genre']} | {row['duration']} min | ⭐ {row['imdbRating']}")  # metadata
		st.write(f"Director: {row['director']}")  # director
		st.write(row['description'])  # synopsis
		st.divider()  # separator

except requests.RequestException as e:  # network/API errors
	st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
