"""Tests for password generation."""

import random
import string

import pytest

from core import DEFAULT_PASSWORD_LENGTH
from core.generator import (
    SYMBOLS,
    GenerationError,
    InvalidLength,
    PasswordSynthesizer,
    generate_password,
)


def has_all_types(password: str) -> bool:
    return (
        any(c in string.ascii_uppercase for c in password)
        and any(c in string.ascii_lowercase for c in password)
        and any(c in string.digits for c in password)
        and any(c in SYMBOLS for c in password)
    )


class TestPasswordGenerator:
    """Test cases for secure password generation."""

    def test_default_password_length(self):
        """Default password should be 16 characters."""
        assert len(generate_password()) == DEFAULT_PASSWORD_LENGTH == 16

    def test_custom_length(self):
        """Password should match requested length."""
        for length in [4, 8, 12, 16, 20, 32, 64]:
            assert len(generate_password(length=length)) == length

    def test_composition_rule(self):
        """Every generated password contains all four character types."""
        for _ in range(200):
            assert has_all_types(generate_password(length=16))

    def test_only_known_characters(self):
        allowed = set(string.ascii_letters + string.digits + SYMBOLS)
        for _ in range(50):
            assert set(generate_password(length=20)) <= allowed

    def test_minimum_length_validation(self):
        """Should raise InvalidLength for length less than selected types."""
        with pytest.raises(InvalidLength):
            generate_password(length=3)

    def test_invalid_length_is_generation_error(self):
        with pytest.raises(GenerationError):
            generate_password(length=0)

    def test_no_character_types_raises_error(self):
        """Should raise error if no character types selected."""
        with pytest.raises(GenerationError):
            generate_password(use_upper=False, use_lower=False,
                              use_digits=False, use_special=False)

    def test_minimum_length_with_all_types(self):
        """Minimum length 4 has exactly one of each type."""
        for _ in range(20):
            password = generate_password(length=4)
            assert len(password) == 4
            assert has_all_types(password)

    def test_only_digits(self):
        password = generate_password(length=12, use_upper=False, use_lower=False,
                                     use_digits=True, use_special=False)
        assert password.isdigit()

    def test_randomness(self):
        """1000 generated passwords should all differ."""
        passwords = {generate_password(length=16) for _ in range(1000)}
        assert len(passwords) == 1000


class TestInjectedRandomness:
    """Test generation with a deterministic randomness provider."""

    def test_seeded_rng_is_reproducible(self):
        first = generate_password(length=16, rng=random.Random(1234))
        second = generate_password(length=16, rng=random.Random(1234))
        assert first == second
        assert has_all_types(first)

    def test_seeded_composition_rule(self):
        """Composition rule holds for every seed, without flakiness."""
        for seed in range(500):
            password = generate_password(length=12, rng=random.Random(seed))
            assert len(password) == 12
            assert has_all_types(password)

    def test_mandatory_characters_are_shuffled(self):
        """The seeded uppercase character does not always stay first."""
        first_chars = {
            generate_password(length=4, rng=random.Random(seed))[0] in string.ascii_uppercase
            for seed in range(100)
        }
        assert first_chars == {True, False}


class TestPasswordSynthesizer:
    """Test the synthesizer bound to a randomness provider."""

    def test_generate_uses_provider(self):
        synthesizer = PasswordSynthesizer(rng=random.Random(7))
        expected = generate_password(length=20, rng=random.Random(7))
        assert synthesizer.generate(20) == expected

    def test_constraints(self):
        synthesizer = PasswordSynthesizer(use_special=False, use_digits=False)
        password = synthesizer.generate(16)
        assert password.isalpha()

    def test_invalid_length(self):
        with pytest.raises(InvalidLength):
            PasswordSynthesizer().generate(2)
