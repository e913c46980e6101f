"""
Tests for the catalog check script.
Run: python tests/test_check_catalog.py
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from movie_catalog.config import DEFAULT_DATA_PATH
from scripts.check_catalog import main as check_catalog


def test_bundled_catalog_passes():
	assert check_catalog([str(DEFAULT_DATA_PATH)]) == 0


def test_missing_catalog_fails():
	assert check_catalog([str(ROOT / 'tests' / 'missing.json')]) == 1


def test_bundled_catalog_ships_inside_the_package():
	assert DEFAULT_DATA_PATH.is_file()
	assert DEFAULT_DATA_PATH.parent.parent.name == 'movie_catalog'
	# package-data entry so non-editable installs include the file
	assert 'movie_catalog = ["data/*.json"]' in (ROOT / 'pyproject.toml').read_text(encoding='utf-8')


if __name__ == '__main__':
	test_bundled_catalog_passes()
	test_bundled_catalog_ships_inside_the_package()
	test_missing_catalog_fails()
	print("Check script tests passed!")
