from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable, Tuple

from .errors import CoverageError, DataFormatError, EncodingError

MAX_CODEPOINT = 0x10FFFF

RECORD_SIZE = 3

# The category tag lives in the top bits of the third byte, the rest of that byte holds bits 16..20 of the range start.
TAG_BITS = 3
TAG_SHIFT = 8 - TAG_BITS
START_BITS = 24 - TAG_BITS

assert MAX_CODEPOINT < 1 << START_BITS

class Category(StrEnum):
	ambiguous = "ambiguous"
	fullwidth = "fullwidth"
	halfwidth = "halfwidth"
	narrow = "narrow"
	wide = "wide"
	neutral = "neutral"
	private_use = "private_use"

# Tags used in the second field of `EastAsianWidth.txt`.
# Private use has no tag of its own, it's only ever produced by filling in unlisted code points.
FILE_TAGS: dict[str, Category] = {
	"A": Category.ambiguous,
	"F": Category.fullwidth,
	"H": Category.halfwidth,
	"N": Category.neutral,
	"Na": Category.narrow,
	"W": Category.wide,
}

# Values stored in packed records. Changing any of these invalidates every table compiled so far.
WIRE_TAGS: dict[Category, int] = {
	Category.ambiguous: 0,
	Category.fullwidth: 1,
	Category.halfwidth: 2,
	Category.narrow: 3,
	Category.wide: 4,
	Category.neutral: 5,
	Category.private_use: 6,
}

CATEGORIES_BY_WIRE_TAG: dict[int, Category] = {tag: category for category, tag in WIRE_TAGS.items()}

@dataclass(frozen = True)
class Range:
	first: int
	last: int
	category: Category

	# Set on ranges that weren't in the data file, but were filled in with a default category.
	synthesized: bool = field(default = False, compare = False)

	def __post_init__(self) -> None:
		if not 0 <= self.first <= self.last <= MAX_CODEPOINT:
			raise ValueError(f"invalid range U+{self.first:04X}..U+{self.last:04X}")

	def __len__(self) -> int:
		return self.last - self.first + 1

	def __contains__(self, code_point: int) -> bool:
		return self.first <= code_point <= self.last

	def __str__(self) -> str:
		return f"U+{self.first:04X}..U+{self.last:04X} {self.category}"

# Check that `ranges` are sorted, don't overlap, and together cover every code point from 0 to 0x10FFFF.
def validate_coverage(ranges: list[Range]) -> None:
	if len(ranges) == 0:
		raise CoverageError("range table is empty")

	index = 0

	for range in ranges:
		if range.first != index:
			raise CoverageError(f"expected a range starting at U+{index:04X}, found {range}")
		index = range.last + 1

	if index != MAX_CODEPOINT + 1:
		raise CoverageError(f"range table ends at U+{index - 1:04X} instead of U+{MAX_CODEPOINT:04X}")

def encode_record(start: int, category: Category) -> bytes:
	tag = WIRE_TAGS.get(category)
	if tag is None or tag >= 1 << TAG_BITS:
		raise EncodingError(f"category {category!r} doesn't fit in {TAG_BITS} bits")

	if not 0 <= start < 1 << START_BITS:
		raise EncodingError(f"range start {start:#x} doesn't fit in {START_BITS} bits")

	return bytes([
		start & 0xFF,
		(start >> 8) & 0xFF,
		(start >> 16) | (tag << TAG_SHIFT),
	])

# Decode the record at `raw[offset:offset + 3]`.
# Returns the range start, and the category of the range beginning there.
def decode_record(raw: bytes, offset: int = 0) -> Tuple[int, Category]:
	a, b, c = raw[offset:offset + RECORD_SIZE]

	start = a | (b << 8) | ((c & ((1 << TAG_SHIFT) - 1)) << 16)
	tag = c >> TAG_SHIFT

	category = CATEGORIES_BY_WIRE_TAG.get(tag)
	if category is None:
		raise DataFormatError(f"unknown category tag {tag} in record at byte {offset}")

	return start, category

# Only range starts are stored. The end of each range is the code point before the next start.
def encode_table(ranges: Iterable[Range]) -> bytes:
	arr = bytearray()
	for range in ranges:
		arr.extend(encode_record(range.first, range.category))

	return bytes(arr)

def iter_records(raw: bytes) -> Iterable[Tuple[int, Category]]:
	if len(raw) % RECORD_SIZE != 0:
		raise DataFormatError(f"packed table is {len(raw)} bytes long, which isn't a multiple of {RECORD_SIZE}")

	for offset in range(0, len(raw), RECORD_SIZE):
		yield decode_record(raw, offset)

def decode_table(raw: bytes) -> list[Range]:
	records = list(iter_records(raw))

	for i, (start, _) in enumerate(records):
		if start > MAX_CODEPOINT:
			raise DataFormatError(f"record {i} starts at {start:#x}, past the last code point")

	ranges = []
	for i, (start, category) in enumerate(records):
		end = records[i + 1][0] - 1 if i + 1 < len(records) else MAX_CODEPOINT
		if end < start:
			raise CoverageError(f"record {i} starts at U+{start:04X}, after the next record's start")

		ranges.append(Range(start, end, category))

	return ranges

assert encode_record(0x10FFFE, Category.neutral) == b"\xfe\xff\xb0"
assert decode_record(b"\x78\x00\x60") == (0x78, Category.narrow)
