from __future__ import annotations

import pathlib

import pytest

DATA_DIR = pathlib.Path(__file__).parent / "data"

@pytest.fixture
def sample_path() -> pathlib.Path:
	return DATA_DIR / "EastAsianWidth-sample.txt"

@pytest.fixture
def sample_lines(sample_path: pathlib.Path) -> list[str]:
	return sample_path.read_text(encoding = "utf-8").splitlines(keepends = True)
