import sys, argparse

from .classifier import Classifier, default_classifier, unicode_version
from .compile import complete_ranges, parse_ranges
from .errors import EastAsianWidthError

def parse_args(argv = None):
	parser = argparse.ArgumentParser(
		prog = 'eawidth-check',
		description = "Dump a packed East Asian Width table, in the format that `eawidth-compile` writes, and optionally check it against the data file it came from.",
	)
	parser.add_argument(
		'filename',
		nargs = '?',
		type = argparse.FileType('rb'),
		help = "raw packed table (default: the table built into this package)",
	)
	parser.add_argument(
		'--verify',
		metavar = 'EastAsianWidth.txt',
		type = argparse.FileType('r', encoding = 'utf-8'),
		help = "check that every code point listed in (or filled in from) this data file classifies the same way",
	)
	parser.add_argument(
		'-q', '--quiet',
		action = 'store_true',
		help = "don't print the ranges",
	)

	return parser.parse_args(argv)

# Returns how many code points were classified differently than the data file says.
def verify(classifier: Classifier, lines: list[str]) -> int:
	mismatches = 0

	for expected in complete_ranges(parse_ranges(lines)):
		for code_point in range(expected.first, expected.last + 1):
			category = classifier.classify(code_point)
			if category != expected.category:
				print(f"U+{code_point:04X}: table says {category}, data file says {expected.category}")
				mismatches += 1

	return mismatches

def main(argv = None) -> int:
	args = parse_args(argv)

	try:
		if args.filename is not None:
			classifier = Classifier(args.filename.read())
		else:
			classifier = default_classifier()
			print(f"Built-in table, Unicode {unicode_version()}")

		if not args.quiet:
			for range in classifier.ranges():
				print(range)

		print(f"{len(classifier)} ranges")

		if args.verify is not None:
			mismatches = verify(classifier, args.verify.readlines())
			print(f"{mismatches} mismatches")
			if mismatches != 0:
				return 1
	except EastAsianWidthError as e:
		print(f"error: {e}", file = sys.stderr)
		return 1

	return 0

if __name__ == '__main__':
	sys.exit(main())
