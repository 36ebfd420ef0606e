"""Unit tests for BcryptPasswordEncoder."""

import pytest

from friggsys.domain.user import Password
from friggsys.infrastructure.security import BcryptPasswordEncoder
from friggsys_config.settings import Settings
from tests.shared.factories import TEST_RAW_PASSWORD


class TestBcryptPasswordEncoder:
    """Tests for BcryptPasswordEncoder (low work factor for speed)."""

    def setup_method(self):
        self.encoder = BcryptPasswordEncoder(rounds=4)

    def test_encrypt_returns_verifiable_hash(self):
        hashed = self.encoder.encrypt(Password.of_raw(TEST_RAW_PASSWORD))

        assert isinstance(hashed, Password)
        assert hashed.get_value() != TEST_RAW_PASSWORD
        assert hashed.get_value().startswith("$2b$04$")
        assert self.encoder.matches(TEST_RAW_PASSWORD, hashed.get_value())

    def test_salted_hashes_differ_but_both_match(self):
        first = self.encoder.encrypt(Password.of_raw(TEST_RAW_PASSWORD)).get_value()
        second = self.encoder.encrypt(Password.of_raw(TEST_RAW_PASSWORD)).get_value()

        assert first != second
        assert self.encoder.matches(TEST_RAW_PASSWORD, first)
        assert self.encoder.matches(TEST_RAW_PASSWORD, second)

    def test_wrong_password_does_not_match(self):
        hashed = self.encoder.encrypt(Password.of_raw(TEST_RAW_PASSWORD)).get_value()

        assert not self.encoder.matches("Bb2@cdef", hashed)

    @pytest.mark.parametrize("bad_hash", ["not-a-hash", "", "$2b$04$short"])
    def test_malformed_hash_does_not_match(self, bad_hash):
        assert self.encoder.matches(TEST_RAW_PASSWORD, bad_hash) is False

    def test_multibyte_password_over_72_bytes(self):
        raw = "Aa1!" + "é" * 40
        assert len(raw.encode("utf-8")) > 72

        hashed = self.encoder.encrypt(Password.of_raw(raw)).get_value()

        assert self.encoder.matches(raw, hashed)

    def test_passwords_differing_after_byte_72_do_not_match(self):
        raw = "Aa1!" + "é" * 40
        variant = "Aa1!" + "é" * 39 + "è"
        Password.of_raw(variant)

        hashed = self.encoder.encrypt(Password.of_raw(raw)).get_value()

        assert not self.encoder.matches(variant, hashed)

    def test_from_settings(self):
        encoder = BcryptPasswordEncoder.from_settings(Settings(_env_file=None, bcrypt_rounds=6))

        assert encoder.rounds == 6
