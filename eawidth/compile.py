import sys, argparse, time, os, re, typing

from dataclasses import dataclass
from typing import Iterable, Optional

from .compress import compact_ranges
from .errors import DataFormatError, EastAsianWidthError
from .util import Category, FILE_TAGS, MAX_CODEPOINT, Range, encode_table, validate_coverage

class TaskStatusReporter:
	def __init__(self, name):
		self.name = name
		self.start_time = time.time()

	def complete(self, failed = False):
		duration_seconds = time.time() - self.start_time
		print(f"{'failed' if failed else 'done'} in {duration_seconds:.3}s", file = sys.stderr)

	def __enter__(self):
		self.start_time = time.time()
		print(self.name + "...", file = sys.stderr, end = "")
		sys.stderr.flush()

	def __exit__(self, _type, _value, _traceback):
		self.complete(failed = _type is not None)

class StatusReporter:
	def __init__(self):
		pass

	def start(self, name: str) -> TaskStatusReporter:
		return TaskStatusReporter(name)

# `HEX;TAG` or `HEX..HEX;TAG`, with whatever followed a `#` already stripped off.
LINE_PATTERN = re.compile(r"^\s*([0-9A-Fa-f]+)(?:\.\.([0-9A-Fa-f]+))?\s*;\s*(\w+)\s*$")

VERSION_PATTERN = re.compile(r"^#\s*EastAsianWidth-(\d+\.\d+\.\d+)\.txt")

# From the header of `EastAsianWidth.txt`: unlisted code points are "N", except in these blocks.
# Checked in order, the first block containing a code point decides its default.
DEFAULT_BLOCKS: list[tuple[int, int, Category]] = [
	# CJK Unified Ideographs Extension A
	(0x3400, 0x4DBF, Category.wide),
	# CJK Unified Ideographs
	(0x4E00, 0x9FFF, Category.wide),
	# CJK Compatibility Ideographs
	(0xF900, 0xFAFF, Category.wide),
	# Planes 2 and 3
	(0x20000, 0x2FFFD, Category.wide),
	(0x30000, 0x3FFFD, Category.wide),

	# Private use areas
	(0xE000, 0xF8FF, Category.private_use),
	(0xF0000, 0xFFFFD, Category.private_use),
	(0x100000, 0x10FFFD, Category.private_use),
]

def read_unicode_version(lines: Iterable[str]) -> Optional[str]:
	for line in lines:
		if (match := VERSION_PATTERN.match(line)) is not None:
			return match.group(1)

		if line.strip() and not line.lstrip().startswith("#"):
			break

	return None

def parse_ranges(lines: Iterable[str]) -> list[Range]:
	ranges: dict[int, Range] = {}

	for line_number, line in enumerate(lines, start = 1):
		content = line.split("#", 1)[0]
		if content.strip() == "":
			continue

		match = LINE_PATTERN.match(content)
		if match is None:
			raise DataFormatError(f"line {line_number}: can't parse {line.rstrip()!r}")

		first_string, last_string, tag = match.groups()

		category = FILE_TAGS.get(tag)
		if category is None:
			raise DataFormatError(f"line {line_number}: unknown category {tag!r} in {line.rstrip()!r}")

		first = int(first_string, 16)
		last = int(last_string, 16) if last_string is not None else first

		if first > last or last > MAX_CODEPOINT:
			raise DataFormatError(f"line {line_number}: invalid range in {line.rstrip()!r}")

		if first in ranges:
			raise DataFormatError(f"line {line_number}: U+{first:04X} was already listed, in {line.rstrip()!r}")

		ranges[first] = Range(first, last, category)

	return [ranges[first] for first in sorted(ranges)]

# Returns the default category of `code_point` along with the exclusive end of the stretch that default applies to.
def default_category(code_point: int) -> tuple[Category, int]:
	for first, last, category in DEFAULT_BLOCKS:
		if first <= code_point <= last:
			return category, last + 1

	# Neutral runs up to wherever the next default block begins.
	following = [first for first, _, _ in DEFAULT_BLOCKS if first > code_point]
	return Category.neutral, min(following, default = MAX_CODEPOINT + 1)

# Synthesize ranges for the code points in [first, end).
# A gap that crosses the edge of a default block gets one range per block.
def fill_gap(first: int, end: int) -> list[Range]:
	filled = []

	while first < end:
		category, block_end = default_category(first)
		last = min(end, block_end) - 1

		filled.append(Range(first, last, category, synthesized = True))
		first = last + 1

	return filled

def complete_ranges(ranges: Iterable[Range]) -> list[Range]:
	completed: list[Range] = []
	index = 0

	for range in ranges:
		if range.first > index:
			completed.extend(fill_gap(index, range.first))

		# Overlapping ranges are kept as they are, so the coverage check below reports them.
		completed.append(range)
		index = max(index, range.last + 1)

	completed.extend(fill_gap(index, MAX_CODEPOINT + 1))

	validate_coverage(completed)

	return completed

@dataclass(frozen = True)
class Statistics:
	# Ranges once unlisted code points were filled in.
	initial: int
	# Ranges after merging.
	final: int
	original: int
	injected: int

	@classmethod
	def collect(cls, completed: list[Range], compacted: list[Range]) -> "Statistics":
		injected = sum(1 for range in completed if range.synthesized)

		return cls(
			initial = len(completed),
			final = len(compacted),
			original = len(completed) - injected,
			injected = injected,
		)

	def __str__(self) -> str:
		return f"{self.initial} initial, {self.final} final, {self.original} original, {self.injected} injected"

@dataclass(frozen = True)
class CompiledTable:
	ranges: list[Range]
	statistics: Statistics
	unicode_version: Optional[str] = None

	def encode(self) -> bytes:
		return encode_table(self.ranges)

def compile_table(lines: Iterable[str]) -> CompiledTable:
	lines = list(lines)

	completed = complete_ranges(parse_ranges(lines))
	compacted = compact_ranges(completed)

	return CompiledTable(
		ranges = compacted,
		statistics = Statistics.collect(completed, compacted),
		unicode_version = read_unicode_version(lines),
	)

BYTES_PER_LINE = 24

def format_module(data: bytes, unicode_version: Optional[str], source: str) -> str:
	lines = [
		f"# Generated by eawidth.compile from {source}. Do not edit.",
		"",
		f'UNICODE_VERSION = "{unicode_version}"' if unicode_version is not None else "UNICODE_VERSION = None",
		"",
		"DATA = (",
	]

	for i in range(0, len(data), BYTES_PER_LINE):
		chunk = data[i:i + BYTES_PER_LINE]
		lines.append('\tb"' + "".join(f"\\x{byte:02x}" for byte in chunk) + '"')

	lines.append(")")

	return "\n".join(lines) + "\n"

def write_table(table: CompiledTable, out: typing.BinaryIO, format: str, source: str = "EastAsianWidth.txt") -> int:
	data = table.encode()

	if format == "py":
		out.write(format_module(data, table.unicode_version, source).encode("utf-8"))
	elif format == "bin":
		out.write(data)
	else:
		raise ValueError(f"unknown output format {format!r}")

	return len(data)

def guess_format(path: str) -> str:
	return "py" if path.endswith(".py") else "bin"

def parse_args(argv = None):
	parser = argparse.ArgumentParser(
		prog = 'eawidth-compile',
		description = "Compile East Asian Width ranges from a Unicode `EastAsianWidth.txt` file into a packed lookup table",
	)
	parser.add_argument(
		'filename',
		type = argparse.FileType('r', encoding = 'utf-8'),
	)
	parser.add_argument(
		'-o', '--out',
		type = argparse.FileType('wb'),
		help = "where to write the table; without this only the range counts are printed",
	)
	parser.add_argument(
		'--format',
		choices = ['py', 'bin'],
		help = "`py` writes a Python module with a `DATA` bytes literal, `bin` writes the raw records (default: from the output file's extension)",
	)

	return parser.parse_args(argv)

def main(argv = None) -> int:
	reporter = StatusReporter()

	args = parse_args(argv)

	try:
		with reporter.start("Parsing data file"):
			lines = args.filename.readlines()
			unicode_version = read_unicode_version(lines)
			parsed = parse_ranges(lines)

		with reporter.start("Filling in unlisted code points"):
			completed = complete_ranges(parsed)

		with reporter.start("Merging ranges"):
			compacted = compact_ranges(completed)
	except EastAsianWidthError as e:
		print(f"error: {e}", file = sys.stderr)
		return 1

	table = CompiledTable(compacted, Statistics.collect(completed, compacted), unicode_version)
	print(table.statistics)

	if args.out is None:
		return 0

	with reporter.start("Writing to file"):
		format = args.format or guess_format(args.out.name)
		size = write_table(table, args.out, format, source = os.path.basename(args.filename.name))
		args.out.flush()

	print(size, "bytes")

	return 0

if __name__ == "__main__":
	sys.exit(main())
