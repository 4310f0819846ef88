"""Tests for hygiene.strength: entropy estimation, classification and feedback."""

from __future__ import annotations

import math

import pytest

from hygiene.strength import (
    EntropyReport,
    StrengthLabel,
    classify_strength,
    estimate_entropy,
    evaluate_password,
    strength_progress,
    suggest_improvements,
)


class TestEstimateEntropy:
    def test_empty_string(self):
        assert estimate_entropy("") == EntropyReport(0.0, 0)

    def test_single_class(self):
        report = estimate_entropy("aaaa")
        assert report.pool_size == 26
        assert report.bits == pytest.approx(4 * math.log2(26))
        assert round(report.bits, 1) == 18.8

    def test_all_four_classes(self):
        report = estimate_entropy("Aa1!")
        assert report.pool_size == 94
        assert report.bits == pytest.approx(4 * math.log2(94))

    def test_uses_classes_present_not_requested(self):
        assert estimate_entropy("1234567890").pool_size == 10
        assert estimate_entropy("abcXYZ").pool_size == 52
        assert estimate_entropy("x~").pool_size == 58

    def test_characters_outside_pools_give_zero(self):
        assert estimate_entropy("    ") == EntropyReport(0.0, 0)
        assert estimate_entropy("ééé") == EntropyReport(0.0, 0)

    def test_outside_characters_still_count_toward_length(self):
        report = estimate_entropy("a b")
        assert report.pool_size == 26
        assert report.bits == pytest.approx(3 * math.log2(26))

    def test_repetition_does_not_lower_estimate(self):
        # Heuristic: assumes uniform selection over the detected pool
        assert estimate_entropy("aaaaaaaa").bits == estimate_entropy("qwhzmbnv").bits


class TestClassifyStrength:
    @pytest.mark.parametrize("bits, label", [
        (0.0, StrengthLabel.VERY_WEAK),
        (29.9, StrengthLabel.VERY_WEAK),
        (30.0, StrengthLabel.WEAK),
        (59.999, StrengthLabel.WEAK),
        (60.0, StrengthLabel.MODERATE),
        (79.9, StrengthLabel.MODERATE),
        (80.0, StrengthLabel.STRONG),
        (99.99, StrengthLabel.STRONG),
        (100.0, StrengthLabel.VERY_STRONG),
        (1e6, StrengthLabel.VERY_STRONG),
        (45, StrengthLabel.WEAK),
    ])
    def test_threshold_bands(self, bits, label):
        assert classify_strength(bits) is label

    @pytest.mark.parametrize("bits", [-0.1, float("nan")])
    def test_rejects_negative_and_nan(self, bits):
        with pytest.raises(ValueError):
            classify_strength(bits)

    def test_labels_are_ordered(self):
        labels = list(StrengthLabel)
        assert labels == sorted(labels)
        assert StrengthLabel.VERY_WEAK < StrengthLabel.VERY_STRONG

    def test_each_label_has_fixed_color_and_intensity(self):
        colors = [label.color for label in StrengthLabel]
        intensities = [label.intensity for label in StrengthLabel]
        assert colors == ["#FF0000", "#FFA500", "#FFFF00", "#9ACD32", "#008000"]
        assert intensities == sorted(intensities)
        assert len(set(intensities)) == len(intensities)

    def test_display_names(self):
        assert [label.display_name for label in StrengthLabel] == [
            "Very Weak", "Weak", "Moderate", "Strong", "Very Strong",
        ]


class TestFeedback:
    @pytest.mark.parametrize("bits, progress", [(0.0, 0.0), (50.0, 0.5), (100.0, 1.0), (250.0, 1.0)])
    def test_progress_is_clamped(self, bits, progress):
        assert strength_progress(bits) == pytest.approx(progress)

    def test_suggestions_for_short_lowercase_password(self):
        assert suggest_improvements("abc") == [
            "Add uppercase letters.",
            "Add numbers.",
            "Add special characters.",
            "Consider making it longer (12+ characters).",
        ]

    def test_no_suggestions_for_long_diverse_password(self):
        assert suggest_improvements("Abcdefgh12!@") == []

    def test_empty_password_gets_every_suggestion(self):
        assert len(suggest_improvements("")) == 5


class TestEvaluatePassword:
    def test_combines_estimate_label_and_feedback(self):
        rating = evaluate_password("Aa1!")
        assert rating.pool_size == 94
        assert rating.label is StrengthLabel.VERY_WEAK
        assert rating.color == "#FF0000"
        assert rating.intensity == StrengthLabel.VERY_WEAK.intensity
        assert rating.progress == pytest.approx(rating.bits / 100)
        assert rating.suggestions == ["Consider making it longer (12+ characters)."]

    def test_long_random_looking_password_is_very_strong(self):
        # 16 characters over 94 symbols: about 104.9 bits
        rating = evaluate_password("k8#pL@9qT2$zM5!x")
        assert rating.label is StrengthLabel.VERY_STRONG
        assert rating.progress == 1.0
