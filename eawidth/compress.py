from typing import Iterable

from .util import Range, validate_coverage

# Merge neighbouring ranges that share a category.
# The input has to be sorted and gapless; the result covers exactly the same code points with the fewest possible ranges.
def compact_ranges(ranges: Iterable[Range]) -> list[Range]:
	compacted: list[Range] = []

	for range in ranges:
		if compacted and compacted[-1].category == range.category and compacted[-1].last + 1 == range.first:
			previous = compacted.pop()
			range = Range(
				previous.first,
				range.last,
				range.category,
				synthesized = previous.synthesized and range.synthesized,
			)

		compacted.append(range)

	validate_coverage(compacted)

	return compacted

def is_minimal(ranges: list[Range]) -> bool:
	return all(a.category != b.category for a, b in zip(ranges, ranges[1:]))
