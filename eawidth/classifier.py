from bisect import bisect_right
from functools import cache
from typing import Iterator

from .errors import CodePointRangeError, CoverageError, DataFormatError
from .util import MAX_CODEPOINT, Category, Range, iter_records

# Looks up the East Asian Width category of code points in a packed range table.
# The table is decoded once, when the classifier is created, and never changes afterwards.
class Classifier:
	def __init__(self, data: bytes) -> None:
		records = list(iter_records(data))
		if len(records) == 0:
			raise DataFormatError("packed table has no records")

		starts = tuple(start for start, _ in records)

		if starts[0] != 0:
			raise CoverageError(f"first range starts at U+{starts[0]:04X} instead of U+0000")

		for i in range(1, len(starts)):
			if starts[i] <= starts[i - 1]:
				raise CoverageError(f"record {i} starts at U+{starts[i]:04X}, which isn't after U+{starts[i - 1]:04X}")

		if starts[-1] > MAX_CODEPOINT:
			raise DataFormatError(f"last record starts at {starts[-1]:#x}, past the last code point")

		self._starts = starts
		self._categories = tuple(category for _, category in records)

	def __len__(self) -> int:
		return len(self._starts)

	def classify(self, code_point: int) -> Category:
		if not 0 <= code_point <= MAX_CODEPOINT:
			raise CodePointRangeError(f"{code_point:#x} is outside the range of Unicode code points")

		# The range containing `code_point` is the last one that starts at or before it.
		return self._categories[bisect_right(self._starts, code_point) - 1]

	def ranges(self) -> Iterator[Range]:
		for i, start in enumerate(self._starts):
			last = self._starts[i + 1] - 1 if i + 1 < len(self._starts) else MAX_CODEPOINT
			yield Range(start, last, self._categories[i])

def load_classifier(path: str) -> Classifier:
	with open(path, "rb") as file:
		return Classifier(file.read())

@cache
def default_classifier() -> Classifier:
	from . import _table

	return Classifier(_table.DATA)

def unicode_version() -> str:
	from . import _table

	return _table.UNICODE_VERSION

def classify(code_point: int) -> Category:
	return default_classifier().classify(code_point)
