"""Tests for hygiene.password_generator: class-based and seed-based generation."""

from __future__ import annotations

from collections import Counter

import pytest

from hygiene import randomness
from hygiene.charsets import CHARACTER_CLASSES, DEFAULT_ALPHABET, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from hygiene.password_generator import (
    InvalidRequest,
    PasswordGenerationError,
    RandomUnavailable,
    generate_password_from_seed,
    generate_password_safe,
    generate_secure_password,
)
from hygiene.randomness import SeededRandomSource
from hygiene.validation import MAX_PASSWORD_LENGTH

ALL_CLASSES = [cls.name for cls in CHARACTER_CLASSES]


def classes_in(password):
    return {cls.name for cls in CHARACTER_CLASSES if set(password) & set(cls.pool)}


class BrokenSource:
    """A source whose entropy pool has gone away."""

    def randbelow(self, upper):
        raise RandomUnavailable("Secure random source unavailable: test")


class TestGenerateSecurePassword:
    @pytest.mark.parametrize("length", range(1, MAX_PASSWORD_LENGTH + 1))
    def test_exact_length(self, length, seeded_source):
        assert len(generate_secure_password(length, ALL_CLASSES, seeded_source)) == length

    def test_every_requested_class_present(self):
        source = SeededRandomSource(7)
        for length in range(4, MAX_PASSWORD_LENGTH + 1):
            for _ in range(20):
                password = generate_secure_password(length, ALL_CLASSES, source)
                assert classes_in(password) == set(ALL_CLASSES)

    def test_subset_of_classes_present_and_exclusive(self, seeded_source):
        for _ in range(100):
            password = generate_secure_password(6, ["digits", "symbols"], seeded_source)
            assert classes_in(password) == {"digits", "symbols"}

    def test_single_class(self, seeded_source):
        assert generate_secure_password(20, ["digits"], seeded_source).isdigit()
        assert generate_secure_password(20, "uppercase", seeded_source).isupper()

    def test_default_classes_are_all_four(self):
        password = generate_secure_password(MAX_PASSWORD_LENGTH)
        assert classes_in(password) == set(ALL_CLASSES)

    def test_same_seed_same_password(self):
        first = generate_secure_password(16, ALL_CLASSES, SeededRandomSource(3))
        second = generate_secure_password(16, ALL_CLASSES, SeededRandomSource(3))
        assert first == second

    def test_guaranteed_characters_are_not_left_at_the_front(self):
        source = SeededRandomSource(11)
        runs = [generate_secure_password(4, ALL_CLASSES, source) for _ in range(200)]
        assert sum(password[0] in LOWERCASE.pool for password in runs) < 200
        assert len({password[3] in SYMBOLS.pool for password in runs}) == 2


class TestShortLengthBoundary:
    """Lengths below the class count only guarantee the first classes in canonical order."""

    def test_length_one_with_all_classes_is_lowercase(self):
        source = SeededRandomSource(5)
        for _ in range(50):
            assert generate_secure_password(1, ALL_CLASSES, source) in LOWERCASE.pool

    def test_length_two_is_one_lowercase_and_one_uppercase(self):
        source = SeededRandomSource(6)
        for _ in range(50):
            password = generate_secure_password(2, ALL_CLASSES, source)
            assert sorted(classes_in(password)) == ["lowercase", "uppercase"]

    def test_length_three_leaves_out_symbols(self):
        source = SeededRandomSource(8)
        for _ in range(50):
            assert classes_in(generate_secure_password(3, ALL_CLASSES, source)) == {
                "lowercase", "uppercase", "digits",
            }

    def test_order_is_canonical_not_request_order(self):
        source = SeededRandomSource(9)
        for _ in range(50):
            assert generate_secure_password(1, ["symbols", "digits"], source) in DIGITS.pool


class TestInvalidSecureRequests:
    @pytest.mark.parametrize("length", [0, -1, MAX_PASSWORD_LENGTH + 1, 100])
    def test_length_out_of_range(self, length, seeded_source):
        with pytest.raises(InvalidRequest):
            generate_secure_password(length, ["lowercase"], seeded_source)

    @pytest.mark.parametrize("length", ["12", 12.5, None, True])
    def test_length_not_an_integer(self, length, seeded_source):
        with pytest.raises(InvalidRequest, match="whole number"):
            generate_secure_password(length, ["lowercase"], seeded_source)

    def test_empty_classes(self, seeded_source):
        with pytest.raises(InvalidRequest, match="At least one character type"):
            generate_secure_password(12, [], seeded_source)

    def test_unknown_class(self, seeded_source):
        with pytest.raises(InvalidRequest, match="emoji"):
            generate_secure_password(12, ["lowercase", "emoji"], seeded_source)

    def test_invalid_request_hierarchy(self):
        assert issubclass(InvalidRequest, PasswordGenerationError)
        assert issubclass(InvalidRequest, ValueError)
        assert not issubclass(RandomUnavailable, PasswordGenerationError)


class TestRandomUnavailable:
    def test_broken_source_propagates(self):
        with pytest.raises(RandomUnavailable):
            generate_secure_password(12, ALL_CLASSES, BrokenSource())

    def test_default_source_failure_propagates(self, monkeypatch):
        def broken(upper):
            raise NotImplementedError("no os randomness")

        monkeypatch.setattr(randomness.secrets, "randbelow", broken)
        with pytest.raises(RandomUnavailable):
            generate_secure_password(12)
        with pytest.raises(RandomUnavailable):
            generate_password_from_seed(12, "abc")


class TestGeneratePasswordFromSeed:
    @pytest.mark.parametrize("length, seed", [
        (12, "abc"),
        (8, "ZZZZ"),
        (32, "P@ss"),
        (5, "héllo"),
        (10, "a b"),
    ])
    def test_multiset_is_seed_plus_default_filler(self, length, seed, seeded_source):
        password = generate_password_from_seed(length, seed, seeded_source)
        assert len(password) == length

        filler = Counter(password)
        filler.subtract(Counter(seed))
        assert all(count >= 0 for count in filler.values())
        assert sum(filler.values()) == length - len(seed)
        assert all(char in DEFAULT_ALPHABET for char in filler.elements())

    def test_seed_filling_the_length_is_just_shuffled(self, seeded_source):
        assert sorted(generate_password_from_seed(6, "abc123", seeded_source)) == sorted("abc123")

    def test_empty_seed_uses_default_alphabet(self, seeded_source):
        password = generate_password_from_seed(16, "", seeded_source)
        assert len(password) == 16
        assert set(password) <= set(DEFAULT_ALPHABET)

    def test_seed_characters_get_shuffled(self):
        source = SeededRandomSource(21)
        results = {generate_password_from_seed(6, "abcdef", source) for _ in range(30)}
        assert len(results) > 1

    def test_seed_longer_than_length(self, seeded_source):
        with pytest.raises(InvalidRequest, match="Too many characters"):
            generate_password_from_seed(5, "abcdef", seeded_source)

    @pytest.mark.parametrize("length", [0, MAX_PASSWORD_LENGTH + 1])
    def test_length_out_of_range(self, length, seeded_source):
        with pytest.raises(InvalidRequest):
            generate_password_from_seed(length, "", seeded_source)

    def test_same_seed_source_same_password(self):
        first = generate_password_from_seed(12, "abc", SeededRandomSource(4))
        second = generate_password_from_seed(12, "abc", SeededRandomSource(4))
        assert first == second


class TestGeneratePasswordSafe:
    def test_success(self, seeded_source):
        ok, password = generate_password_safe(16, ALL_CLASSES, seeded_source)
        assert ok
        assert len(password) == 16

    def test_failure_returns_message(self):
        assert generate_password_safe(40) == (False, "Password length cannot exceed 32 characters")
        assert generate_password_safe(12, []) == (False, "At least one character type must be selected")
