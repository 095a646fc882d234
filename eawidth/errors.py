class EastAsianWidthError(Exception):
	pass

# Raised while reading `EastAsianWidth.txt` or a packed table that is not well-formed.
class DataFormatError(EastAsianWidthError, ValueError):
	pass

# The range table has a gap or an overlap somewhere in 0..0x10FFFF.
class CoverageError(EastAsianWidthError):
	pass

class EncodingError(EastAsianWidthError, ValueError):
	pass

class CodePointRangeError(EastAsianWidthError, ValueError):
	pass

# A low surrogate showed up without the high surrogate that should precede it.
class MalformedStringError(EastAsianWidthError, ValueError):
	pass

class WidthPolicyError(EastAsianWidthError, ValueError):
	pass
