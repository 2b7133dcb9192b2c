"""Domain Enum 테스트."""

import pytest

from apps.identify.domain.enums import BackendKind, MaterialCategory


class TestMaterialCategoryCoerce:
    """MaterialCategory.coerce() 테스트."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("plastic", MaterialCategory.PLASTIC),
            ("Organic", MaterialCategory.ORGANIC),
            ("  METAL ", MaterialCategory.METAL),
            ("electronic", MaterialCategory.ELECTRONIC),
        ],
    )
    def test_known_values(self, value, expected):
        """대소문자/공백 무시."""
        assert MaterialCategory.coerce(value) == expected

    def test_unknown_value_falls_back_to_mixed(self):
        """알 수 없는 카테고리 → mixed."""
        assert MaterialCategory.coerce("unobtainium") == MaterialCategory.MIXED

    @pytest.mark.parametrize("value", [None, 42, "", ["plastic"]])
    def test_non_string_or_empty_is_mixed(self, value):
        """문자열이 아니거나 빈 값 → mixed."""
        assert MaterialCategory.coerce(value) == MaterialCategory.MIXED

    def test_enum_member_passthrough(self):
        assert MaterialCategory.coerce(MaterialCategory.GLASS) is MaterialCategory.GLASS

    def test_has_eight_members(self):
        assert len(list(MaterialCategory)) == 8


class TestBackendKind:
    def test_other(self):
        assert BackendKind.LOCAL_MODEL.other == BackendKind.REMOTE_AI
        assert BackendKind.REMOTE_AI.other == BackendKind.LOCAL_MODEL
