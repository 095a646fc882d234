from .classifier import Classifier, classify, default_classifier, load_classifier, unicode_version
from .errors import (
	CodePointRangeError,
	CoverageError,
	DataFormatError,
	EastAsianWidthError,
	EncodingError,
	MalformedStringError,
	WidthPolicyError,
)
from .util import Category, Range
from .width import (
	WidthConfig,
	contains_ambiguous,
	contains_definite_width,
	contains_fullwidth,
	contains_fullwidth_or_wide,
	contains_fullwidth_or_wide_or_ambiguous,
	contains_halfwidth,
	contains_halfwidth_or_narrow,
	contains_halfwidth_or_narrow_or_ambiguous,
	contains_narrow,
	contains_neutral,
	contains_private_use,
	contains_wide,
	has_definite_width,
	is_ambiguous,
	is_fullwidth,
	is_fullwidth_or_wide,
	is_fullwidth_or_wide_or_ambiguous,
	is_halfwidth,
	is_halfwidth_or_narrow,
	is_halfwidth_or_narrow_or_ambiguous,
	is_narrow,
	is_neutral,
	is_private_use,
	is_wide,
	iter_code_points,
	resolve_width,
	string_width,
	width,
)
