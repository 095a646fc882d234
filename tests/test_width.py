"""Tests for eawidth.width: width policy, string iteration and predicates."""
from __future__ import annotations

import pytest

import eawidth
from eawidth.classifier import Classifier
from eawidth.compile import compile_table
from eawidth.errors import MalformedStringError, WidthPolicyError
from eawidth.util import Category
from eawidth.width import (
	FIXED_WIDTHS,
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

# 音楽の聴き方, six wide characters
WIDE_TEXT = "".join(chr(code_point) for code_point in (0x97F3, 0x697D, 0x306E, 0x8074, 0x304D, 0x65B9))

# ── WidthConfig / resolve_width ──────────────────────────────────────


class TestResolveWidth:
	@pytest.mark.parametrize("config", [
		None,
		WidthConfig(),
		WidthConfig.uniform(0),
		WidthConfig(fallback = lambda code_point: 7),
	])
	def test_fixed_categories_ignore_config(self, config: WidthConfig | None) -> None:
		assert resolve_width(0x41, Category.fullwidth, config) == 2
		assert resolve_width(0x41, Category.wide, config) == 2
		assert resolve_width(0x41, Category.halfwidth, config) == 1
		assert resolve_width(0x41, Category.narrow, config) == 1

	def test_fixed_widths_cover_definite_categories(self) -> None:
		assert set(FIXED_WIDTHS) == {Category.fullwidth, Category.wide, Category.halfwidth, Category.narrow}

	def test_explicit_widths(self) -> None:
		config = WidthConfig(ambiguous_width = 2, neutral_width = 1, private_use_width = 0)
		assert resolve_width(0xA1, Category.ambiguous, config) == 2
		assert resolve_width(0x00, Category.neutral, config) == 1
		assert resolve_width(0xE000, Category.private_use, config) == 0

	def test_explicit_width_beats_fallback(self) -> None:
		config = WidthConfig(ambiguous_width = 1, fallback = lambda code_point: 2)
		assert resolve_width(0xA1, Category.ambiguous, config) == 1
		assert resolve_width(0x00, Category.neutral, config) == 2

	def test_fallback_receives_code_point(self) -> None:
		seen: list[int] = []

		def fallback(code_point: int) -> int:
			seen.append(code_point)
			return 1

		resolve_width(0x212B, Category.ambiguous, WidthConfig(fallback = fallback))
		assert seen == [0x212B]

	def test_category_fallback_receives_category(self) -> None:
		config = WidthConfig(category_fallback = lambda code_point, category: 0 if category == Category.private_use else 1)
		assert resolve_width(0xE000, Category.private_use, config) == 0
		assert resolve_width(0xA1, Category.ambiguous, config) == 1

	@pytest.mark.parametrize("category", [Category.ambiguous, Category.neutral, Category.private_use])
	def test_no_policy_is_an_error(self, category: Category) -> None:
		with pytest.raises(WidthPolicyError):
			resolve_width(0x41, category)

	def test_both_fallbacks_is_an_error(self) -> None:
		with pytest.raises(WidthPolicyError):
			WidthConfig(fallback = lambda code_point: 1, category_fallback = lambda code_point, category: 1)

	def test_uniform(self) -> None:
		assert WidthConfig.uniform(1) == WidthConfig(ambiguous_width = 1, neutral_width = 1, private_use_width = 1)


# ── width / string_width ─────────────────────────────────────────────


class TestWidth:
	def test_cjk_ideograph(self) -> None:
		assert eawidth.classify(0x96F3) == Category.wide
		assert width(0x96F3) == 2

	def test_latin_letter(self) -> None:
		assert eawidth.classify(ord("x")) == Category.narrow
		assert width(ord("x")) == 1

	def test_emoji(self) -> None:
		assert width(0x1F49C) == 2

	def test_angstrom_sign_with_fallback(self) -> None:
		config = WidthConfig(fallback = lambda code_point: 2 if code_point == 0x212B else 1)
		assert eawidth.classify(0x212B) == Category.ambiguous
		assert width(0x212B, config) == 2
		assert width(0x2126, config) == 1

	def test_ambiguous_without_policy(self) -> None:
		with pytest.raises(WidthPolicyError):
			width(0x212B)

	def test_custom_classifier(self, sample_lines: list[str]) -> None:
		classifier = Classifier(compile_table(sample_lines).encode())
		assert width(0xE000, WidthConfig(private_use_width = 0), classifier = classifier) == 0


class TestStringWidth:
	def test_wide_text(self) -> None:
		assert string_width(WIDE_TEXT) == 12

	def test_mixed_text(self) -> None:
		assert string_width("abあ", WidthConfig.uniform(1)) == 4
		assert string_width("¡¡", WidthConfig(ambiguous_width = 2)) == 4

	def test_empty(self) -> None:
		assert string_width("") == 0

	def test_surrogate_pair(self) -> None:
		assert string_width("💜") == 2

	def test_lone_low_surrogate(self) -> None:
		with pytest.raises(MalformedStringError):
			string_width("\udc9cabc")

	def test_policy_error_for_neutral(self) -> None:
		with pytest.raises(WidthPolicyError):
			string_width("aก")


# ── iter_code_points ─────────────────────────────────────────────────


class TestIterCodePoints:
	def test_plain(self) -> None:
		assert list(iter_code_points("aあ\U0001f49c")) == [0x61, 0x3042, 0x1F49C]

	def test_joins_surrogate_pairs(self) -> None:
		text = "\ud83d\udc9c"
		assert list(iter_code_points("x💜y")) == [0x78, 0x1F49C, 0x79]
		assert list(iter_code_points(text)) == [0x1F49C]

	def test_low_surrogate_first(self) -> None:
		with pytest.raises(MalformedStringError, match = "index 0"):
			list(iter_code_points("\udc00"))

	def test_low_surrogate_after_pair(self) -> None:
		with pytest.raises(MalformedStringError, match = "index 1"):
			list(iter_code_points("💜\udc9c"))

	def test_unpaired_high_surrogate(self) -> None:
		with pytest.raises(MalformedStringError):
			list(iter_code_points("a\ud83d"))

	def test_high_surrogate_before_letter(self) -> None:
		with pytest.raises(MalformedStringError):
			list(iter_code_points("\ud83da"))


# ── Predicates ───────────────────────────────────────────────────────


class TestIsPredicates:
	def test_single_categories(self) -> None:
		assert is_ambiguous(0xA1)
		assert is_fullwidth(0x3000)
		assert is_halfwidth(0xFF71)
		assert is_narrow("x")
		assert is_wide("雳")
		assert is_neutral(0x00)
		assert not is_private_use(0xE000)

	def test_groups(self) -> None:
		assert is_fullwidth_or_wide(0x3000)
		assert is_fullwidth_or_wide(0x96F3)
		assert not is_fullwidth_or_wide(0xA1)
		assert is_halfwidth_or_narrow(0xFF71)
		assert is_halfwidth_or_narrow("x")
		assert is_fullwidth_or_wide_or_ambiguous(0xA1)
		assert is_halfwidth_or_narrow_or_ambiguous(0xA1)
		assert not is_halfwidth_or_narrow_or_ambiguous(0x96F3)

	def test_surrogate_pair_string(self) -> None:
		assert is_wide("💜")

	def test_more_than_one_character(self) -> None:
		with pytest.raises(ValueError):
			is_wide("ab")

	def test_has_definite_width(self) -> None:
		assert has_definite_width(0x41)
		assert not has_definite_width(0xA1)
		assert has_definite_width(WIDE_TEXT + "abc")
		assert not has_definite_width("abc¡")
		assert has_definite_width("")


class TestContains:
	def test_wide_text(self) -> None:
		assert contains_wide(WIDE_TEXT)
		assert contains_fullwidth_or_wide(WIDE_TEXT)
		assert contains_fullwidth_or_wide_or_ambiguous(WIDE_TEXT)
		assert contains_definite_width(WIDE_TEXT)
		assert not contains_narrow(WIDE_TEXT)
		assert not contains_ambiguous(WIDE_TEXT)
		assert not contains_halfwidth_or_narrow(WIDE_TEXT)

	def test_each_category(self) -> None:
		assert contains_ambiguous("a¡")
		assert contains_fullwidth("a\u3000")
		assert contains_halfwidth("a\uff71")
		assert contains_narrow("\u3000a")
		assert contains_neutral("aก")
		assert not contains_private_use("a")
		assert contains_halfwidth_or_narrow_or_ambiguous("\u3000¡")

	def test_empty(self) -> None:
		assert not contains_wide("")
		assert not contains_definite_width("")

	def test_lone_low_surrogate(self) -> None:
		with pytest.raises(MalformedStringError):
			contains_wide("\udc00雳")
