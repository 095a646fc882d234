from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

from .classifier import Classifier, classify, default_classifier
from .errors import MalformedStringError, WidthPolicyError
from .util import Category

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)

# Categories whose width doesn't depend on the caller.
FIXED_WIDTHS: dict[Category, int] = {
	Category.fullwidth: 2,
	Category.wide: 2,
	Category.halfwidth: 1,
	Category.narrow: 1,
}

DEFINITE_CATEGORIES = frozenset(FIXED_WIDTHS)

# How wide ambiguous, neutral and private use code points are.
# An explicit width for a category always wins, otherwise `fallback` or `category_fallback` decides.
# With neither, asking for the width of such a code point raises `WidthPolicyError`.
@dataclass(frozen = True)
class WidthConfig:
	ambiguous_width: Optional[int] = None
	neutral_width: Optional[int] = None
	private_use_width: Optional[int] = None
	fallback: Optional[Callable[[int], int]] = None
	category_fallback: Optional[Callable[[int, Category], int]] = None

	def __post_init__(self) -> None:
		if self.fallback is not None and self.category_fallback is not None:
			raise WidthPolicyError("set either `fallback` or `category_fallback`, not both")

	@classmethod
	def uniform(cls, width: int) -> "WidthConfig":
		return cls(ambiguous_width = width, neutral_width = width, private_use_width = width)

	def explicit_width(self, category: Category) -> Optional[int]:
		return {
			Category.ambiguous: self.ambiguous_width,
			Category.neutral: self.neutral_width,
			Category.private_use: self.private_use_width,
		}.get(category)

def resolve_width(code_point: int, category: Category, config: Optional[WidthConfig] = None) -> int:
	if (fixed := FIXED_WIDTHS.get(category)) is not None:
		return fixed

	if config is None:
		config = WidthConfig()

	if (explicit := config.explicit_width(category)) is not None:
		return explicit

	if config.fallback is not None:
		return config.fallback(code_point)

	if config.category_fallback is not None:
		return config.category_fallback(code_point, category)

	raise WidthPolicyError(f"no width configured for {category} code point U+{code_point:04X}")

def width(code_point: int, config: Optional[WidthConfig] = None, classifier: Optional[Classifier] = None) -> int:
	if classifier is None:
		classifier = default_classifier()

	return resolve_width(code_point, classifier.classify(code_point), config)

# Yield the code points of `text` from left to right.
# Surrogate pairs (left behind by e.g. decoding with `surrogatepass`) are joined back into one code point.
def iter_code_points(text: str) -> Iterator[int]:
	i = 0
	while i < len(text):
		code_point = ord(text[i])

		if code_point in LOW_SURROGATES:
			raise MalformedStringError(f"low surrogate U+{code_point:04X} at index {i} doesn't follow a high surrogate")

		if code_point in HIGH_SURROGATES:
			if i + 1 >= len(text) or ord(text[i + 1]) not in LOW_SURROGATES:
				raise MalformedStringError(f"high surrogate U+{code_point:04X} at index {i} isn't followed by a low surrogate")

			code_point = 0x10000 + ((code_point - 0xD800) << 10) + (ord(text[i + 1]) - 0xDC00)
			i += 1

		i += 1
		yield code_point

def string_width(text: str, config: Optional[WidthConfig] = None, classifier: Optional[Classifier] = None) -> int:
	if classifier is None:
		classifier = default_classifier()

	return sum(resolve_width(code_point, classifier.classify(code_point), config) for code_point in iter_code_points(text))

CodePointLike = Union[int, str]

def _code_point(value: CodePointLike) -> int:
	if isinstance(value, int):
		return value

	code_points = list(iter_code_points(value))
	if len(code_points) != 1:
		raise ValueError(f"expected a single character, got {value!r}")

	return code_points[0]

def _is(value: CodePointLike, *categories: Category) -> bool:
	return classify(_code_point(value)) in categories

def is_ambiguous(value: CodePointLike) -> bool: return _is(value, Category.ambiguous)
def is_fullwidth(value: CodePointLike) -> bool: return _is(value, Category.fullwidth)
def is_halfwidth(value: CodePointLike) -> bool: return _is(value, Category.halfwidth)
def is_narrow(value: CodePointLike) -> bool: return _is(value, Category.narrow)
def is_wide(value: CodePointLike) -> bool: return _is(value, Category.wide)
def is_neutral(value: CodePointLike) -> bool: return _is(value, Category.neutral)
def is_private_use(value: CodePointLike) -> bool: return _is(value, Category.private_use)

def is_fullwidth_or_wide(value: CodePointLike) -> bool:
	return _is(value, Category.fullwidth, Category.wide)

def is_halfwidth_or_narrow(value: CodePointLike) -> bool:
	return _is(value, Category.halfwidth, Category.narrow)

def is_fullwidth_or_wide_or_ambiguous(value: CodePointLike) -> bool:
	return _is(value, Category.fullwidth, Category.wide, Category.ambiguous)

def is_halfwidth_or_narrow_or_ambiguous(value: CodePointLike) -> bool:
	return _is(value, Category.halfwidth, Category.narrow, Category.ambiguous)

# True if `value` is a code point with a definite width, or a string made up only of those.
def has_definite_width(value: CodePointLike) -> bool:
	if isinstance(value, int):
		return classify(value) in DEFINITE_CATEGORIES

	return all(classify(code_point) in DEFINITE_CATEGORIES for code_point in iter_code_points(value))

def _contains(text: str, *categories: Category) -> bool:
	return any(classify(code_point) in categories for code_point in iter_code_points(text))

def contains_ambiguous(text: str) -> bool: return _contains(text, Category.ambiguous)
def contains_fullwidth(text: str) -> bool: return _contains(text, Category.fullwidth)
def contains_halfwidth(text: str) -> bool: return _contains(text, Category.halfwidth)
def contains_narrow(text: str) -> bool: return _contains(text, Category.narrow)
def contains_wide(text: str) -> bool: return _contains(text, Category.wide)
def contains_neutral(text: str) -> bool: return _contains(text, Category.neutral)
def contains_private_use(text: str) -> bool: return _contains(text, Category.private_use)

def contains_definite_width(text: str) -> bool:
	return _contains(text, *DEFINITE_CATEGORIES)

def contains_fullwidth_or_wide(text: str) -> bool:
	return _contains(text, Category.fullwidth, Category.wide)

def contains_halfwidth_or_narrow(text: str) -> bool:
	return _contains(text, Category.halfwidth, Category.narrow)

def contains_fullwidth_or_wide_or_ambiguous(text: str) -> bool:
	return _contains(text, Category.fullwidth, Category.wide, Category.ambiguous)

def contains_halfwidth_or_narrow_or_ambiguous(text: str) -> bool:
	return _contains(text, Category.halfwidth, Category.narrow, Category.ambiguous)
