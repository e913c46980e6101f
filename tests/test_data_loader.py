"""
Tests for DataLoader: reading the bundled file, field validation, and fail-soft loading.
Run: python tests/test_data_loader.py
"""

import json
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from movie_catalog.config import DEFAULT_DATA_PATH
from movie_catalog.data_loader import DataLoader
from movie_catalog.models import Catalog, MovieDataError

DATA_PATH = DEFAULT_DATA_PATH


def make_record(**overrides):
	record = {
		"id": 1,
		"movieName": "The Prison Escape",
		"director": "John Doe",
		"year": 1994,
		"genre": "Drama",
		"description": "Two imprisoned men bond over a number of years.",
		"duration": 142,
		"imdbRating": 5.0,
	}
	record.update(overrides)
	return record


def load_text(text):
	"""Write `text` to a temporary file and load it."""
	with tempfile.TemporaryDirectory() as tmp:
		path = Path(tmp) / 'movies.json'
		path.write_text(text, encoding='utf-8')
		return DataLoader().load_movies_from_json(path)


def load_bytes(data):
	"""Write raw bytes to a temporary file and load it."""
	with tempfile.TemporaryDirectory() as tmp:
		path = Path(tmp) / 'movies.json'
		path.write_bytes(data)
		return DataLoader().load_movies_from_json(path)


def assert_raises_data_error(records, fragment):
	try:
		DataLoader().parse_records(records)
	except MovieDataError as e:
		assert fragment in str(e), f"expected '{fragment}' in '{e}'"
		return
	raise AssertionError(f"expected MovieDataError mentioning '{fragment}'")


def test_bundled_file_loads_twelve_movies():
	result = DataLoader().load_movies_from_json(DATA_PATH)
	assert result.ok and result.error is None
	assert len(result.movies) == 12
	first = result.movies[0]
	assert first.id == 1
	assert first.name == "The Prison Escape"
	assert first.genre == "Drama"
	assert isinstance(first.rating, float)


def test_source_order_is_preserved():
	records = [make_record(id=3, movieName="C"), make_record(id=1, movieName="A"), make_record(id=2, movieName="B")]
	result = load_text(json.dumps(records))
	assert [m.id for m in result.movies] == [3, 1, 2]


def test_fields_are_mapped_from_source_names():
	movie = DataLoader().parse_records([make_record(duration=99, imdbRating=7)])[0]
	assert movie.duration_minutes == 99
	assert movie.rating == 7.0 and isinstance(movie.rating, float)
	assert movie.description.startswith("Two imprisoned")


def test_missing_file_fails_soft():
	result = DataLoader().load_movies_from_json(ROOT / 'tests' / 'does-not-exist.json')
	assert not result.ok
	assert result.movies == ()
	assert "not found" in result.error


def test_invalid_json_fails_soft():
	result = load_text('[{"id": 1,')
	assert not result.ok
	assert result.movies == ()
	assert "Invalid JSON" in result.error


def test_directory_path_fails_soft():
	with tempfile.TemporaryDirectory() as tmp:
		result = DataLoader().load_movies_from_json(tmp)
	assert not result.ok
	assert result.movies == ()
	assert "could not be read" in result.error


def test_undecodable_bytes_fail_soft():
	result = load_bytes(b'[\xff\xfe]')
	assert not result.ok
	assert result.movies == ()
	assert "could not be read" in result.error


def test_oversized_integer_fails_soft():
	# valid JSON, but beyond Python's int-string conversion limit
	result = load_text('[{"id": ' + '9' * 5000 + '}]')
	assert not result.ok
	assert result.movies == ()
	# "Invalid JSON" where the digit limit applies, "Invalid movie data" on interpreters without it
	assert "Invalid" in result.error


def test_deep_nesting_fails_soft():
	result = load_text('[' * 100000 + ']' * 100000)
	assert not result.ok
	assert result.movies == ()
	assert "Invalid JSON" in result.error


def test_top_level_must_be_array():
	result = load_text(json.dumps(make_record()))
	assert not result.ok
	assert "JSON array" in result.error


def test_one_bad_record_aborts_whole_load():
	records = [make_record(id=1), make_record(id=2, year="1990"), make_record(id=3)]
	result = load_text(json.dumps(records))
	assert not result.ok
	assert result.movies == ()
	assert "record 1" in result.error and "'year'" in result.error


def test_missing_field_is_rejected():
	record = make_record()
	del record["director"]
	assert_raises_data_error([record], "missing field 'director'")
	assert_raises_data_error([make_record(genre=None)], "missing field 'genre'")


def test_wrong_types_are_rejected():
	assert_raises_data_error([make_record(id="1")], "'id' must be int")
	assert_raises_data_error([make_record(id=True)], "'id' must be int")
	assert_raises_data_error([make_record(imdbRating="8.1")], "'imdbRating' must be int or float")
	assert_raises_data_error([make_record(duration=120.5)], "'duration' must be int")
	assert_raises_data_error(["not an object"], "expected an object")


def test_value_constraints():
	assert_raises_data_error([make_record(id=0)], "id must be positive")
	assert_raises_data_error([make_record(duration=-5)], "duration must be positive")
	assert_raises_data_error([make_record(movieName="   ")], "movieName must not be empty")


def test_duplicate_ids_are_rejected():
	assert_raises_data_error([make_record(id=4), make_record(id=4, movieName="Other")], "duplicate id 4")


def test_load_catalog_builds_index():
	catalog = DataLoader().load_catalog(DATA_PATH)
	assert isinstance(catalog, Catalog)
	assert len(catalog.by_id) == len(catalog) == 12
	for movie in catalog.movies:
		assert catalog.by_id[movie.id] is movie


def test_load_catalog_is_empty_on_failure():
	catalog = DataLoader().load_catalog(ROOT / 'tests' / 'does-not-exist.json')
	assert len(catalog) == 0
	assert len(catalog.by_id) == 0


def main():
	print("Running DataLoader tests...")
	for name, fn in sorted(globals().items()):
		if name.startswith('test_') and callable(fn):
			fn()
			print(f" - {name} ok")
	print("All DataLoader tests passed!")


if __name__ == '__main__':
	main()
