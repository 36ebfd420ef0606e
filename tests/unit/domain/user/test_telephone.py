"""Unit tests for Telephone value object."""

import pytest

from friggsys.domain.shared.exceptions import ValidationError
from friggsys.domain.user import Telephone


class TestTelephone:
    """Tests for Telephone."""

    @pytest.mark.parametrize("value", ["(11) 9876-5432", "(21) 98765-4321"])
    def test_valid_formats(self, value):
        assert Telephone.of(value).value == value

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_empty_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Telephone.of(value)

        assert exc_info.value.message == "telephone cannot be empty"

    @pytest.mark.parametrize(
        "value",
        [
            "11987654321",
            "(11)98765-4321",
            "(11) 987-4321",
            "(11) 987654-4321",
            "+55 (11) 98765-4321",
            " (11) 98765-4321",
            "(11) 98765-4321\n",
            "(1) 98765-4321",
        ],
    )
    def test_invalid_format_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            Telephone.of(value)

        assert exc_info.value.message == "telephone does not match required pattern"
        assert exc_info.value.validation_type == "pattern_mismatch"
        assert exc_info.value.details["requirement"] == "Invalid telephone format"
