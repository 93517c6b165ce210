"""Unit tests for plugindetails.versioning."""

from __future__ import annotations

import pytest

from plugindetails.versioning import compare_versions, is_newer


class TestIsNewer:
    def test_equal_is_not_newer(self) -> None:
        assert is_newer("1.0.0", "1.0.0") is False

    def test_minor_bump(self) -> None:
        assert is_newer("1.0.0", "1.2.0") is True

    def test_older_remote(self) -> None:
        assert is_newer("2.0.0", "1.9.9") is False

    def test_numeric_not_lexical(self) -> None:
        assert is_newer("1.9.0", "1.10.0") is True

    def test_extra_trailing_number_is_newer(self) -> None:
        assert is_newer("1.0", "1.0.0") is True
        assert is_newer("1.0.0", "1.0") is False
        assert is_newer("1.0", "1.0.1") is True

    def test_same_length_equal(self) -> None:
        assert compare_versions("1.0", "1.0") == 0


class TestCompareVersions:
    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            ("1.0.0", "1.0.0", 0),
            ("1.0.0", "1.2.0", -1),
            ("1.2.0", "1.0.0", 1),
            ("1.0.0rc1", "1.0.0", -1),
        ],
    )
    def test_pep440(self, left: str, right: str, expected: int) -> None:
        assert compare_versions(left, right) == expected

    def test_fallback_for_non_pep440(self) -> None:
        # "2024.01.x-beta" is not PEP 440; segment comparison applies.
        assert compare_versions("2024.01.x-beta", "2024.02.x-beta") == -1

    def test_fallback_textual_segment_sorts_before_number(self) -> None:
        assert compare_versions("1.0.foo", "1.0.0") == -1

    def test_empty_local_is_older(self) -> None:
        assert is_newer("", "1.0.0") is True

    def test_fallback_extra_text_segment_is_older(self) -> None:
        assert compare_versions("1.0.foo", "1.0") == -1
        assert compare_versions("1.0", "1.0.foo") == 1

    def test_fallback_extra_number_is_newer(self) -> None:
        assert compare_versions("1.0.x-1", "1.0.x") == 1
