"""配列モードの列挙フィールドのテスト."""

from __future__ import annotations

import pytest

from symenum import Model, UnknownCodeError, ValidationError, register, register_config


@pytest.fixture
def sample_cls(host_cls: type[Model]) -> type[Model]:
    register_config(host_cls, {"states": {"abc": 1, "def": 2}, "array": True})
    return host_cls


class TestStaticAccessor:
    """フィールド名が既に複数形の場合の静的アクセサ."""

    def test_class_access_returns_mapping(self, sample_cls: type[Model]) -> None:
        assert sample_cls.states == {"abc": 1, "def": 2}  # type: ignore[attr-defined]

    def test_instance_access_returns_names(self, sample_cls: type[Model]) -> None:
        a = sample_cls()
        a.write_attribute("states", [1, 2])
        assert a.states == ["abc", "def"]  # type: ignore[attr-defined]

    def test_singular_field_gets_plural_accessor(self, host_cls: type[Model]) -> None:
        register(host_cls, "tag", {"gift": 1}, array=True)
        assert host_cls.tags == {"gift": 1}  # type: ignore[attr-defined]


class TestGetter:
    """ゲッター."""

    def test_none(self, sample_cls: type[Model]) -> None:
        assert sample_cls().states is None  # type: ignore[attr-defined]

    def test_preserves_order_and_duplicates(self, sample_cls: type[Model]) -> None:
        a = sample_cls()
        a.write_attribute("states", [2, 1, 2])
        assert a.states == ["def", "abc", "def"]  # type: ignore[attr-defined]

    def test_empty(self, sample_cls: type[Model]) -> None:
        a = sample_cls()
        a.write_attribute("states", [])
        assert a.states == []  # type: ignore[attr-defined]

    def test_unknown_code(self, sample_cls: type[Model]) -> None:
        a = sample_cls()
        a.write_attribute("states", [1, 9])
        with pytest.raises(UnknownCodeError, match="unknown enum code for states: 9"):
            _ = a.states  # type: ignore[attr-defined]

    def test_non_sequence_raw_value(self, sample_cls: type[Model]) -> None:
        """配列でない生の値も UnknownCodeError."""
        a = sample_cls()
        a.write_attribute("states", 1)
        with pytest.raises(UnknownCodeError, match="unknown enum codes for states: 1"):
            _ = a.states  # type: ignore[attr-defined]
        assert a.is_abc() is False  # type: ignore[attr-defined]


class TestSetter:
    """セッター."""

    def test_writes_codes(self, sample_cls: type[Model]) -> None:
        a = sample_cls()
        a.states = ["abc", "def"]  # type: ignore[attr-defined]
        assert a.read_attribute("states") == [1, 2]

    def test_tuple(self, sample_cls: type[Model]) -> None:
        a = sample_cls()
        a.states = ("def",)  # type: ignore[attr-defined]
        assert a.read_attribute("states") == [2]

    def test_round_trip_with_duplicates(self, sample_cls: type[Model]) -> None:
        a = sample_cls()
        a.states = ["def", "abc", "def"]  # type: ignore[attr-defined]
        assert a.states == ["def", "abc", "def"]  # type: ignore[attr-defined]

    def test_none(self, sample_cls: type[Model]) -> None:
        a = sample_cls(states=["abc"])
        a.states = None  # type: ignore[attr-defined]
        assert a.read_attribute("states") is None

    @pytest.mark.parametrize(
        "value",
        [
            "abc",
            ["foo"],
            ["abc", "foo"],
            [1],
            {"abc"},
            {"abc": 1},
            1,
        ],
    )
    def test_invalid_value(self, sample_cls: type[Model], value: object) -> None:
        a = sample_cls()
        with pytest.raises(ValidationError, match="^invalid enum array value"):
            a.states = value  # type: ignore[attr-defined]
        assert a.read_attribute("states") is None

    def test_constructor_encodes(self, sample_cls: type[Model]) -> None:
        a = sample_cls(states=["def"])
        assert a.read_attribute("states") == [2]


class TestPredicatesAndMutators:
    """配列モードの述語と変更メソッド."""

    def test_predicate_membership(self, sample_cls: type[Model]) -> None:
        a = sample_cls(states=["def"])
        assert a.is_def() is True  # type: ignore[attr-defined]
        assert a.is_abc() is False  # type: ignore[attr-defined]

    def test_predicate_none(self, sample_cls: type[Model]) -> None:
        assert sample_cls().is_abc() is False  # type: ignore[attr-defined]

    def test_mutator_persists_single_element_list(self, sample_cls: type[Model]) -> None:
        a = sample_cls(states=["abc", "def"])
        a.set_abc()  # type: ignore[attr-defined]
        assert a.saved == [{"states": [1]}]  # type: ignore[attr-defined]
        assert a.states == ["abc"]  # type: ignore[attr-defined]

    def test_mutator_docstring(self, sample_cls: type[Model]) -> None:
        assert "[1]" in sample_cls.set_abc.__doc__  # type: ignore[attr-defined]

    def test_scopes(self, sample_cls: type[Model]) -> None:
        assert sample_cls.abc() == {"states": 1}  # type: ignore[attr-defined]
