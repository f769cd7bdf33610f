"""EnumMapping: シンボル名 → 整数コードの検証済みマッピング."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from symenum.exceptions import ConfigurationError


def malformed(detail: str) -> ConfigurationError:
    """「malformed configuration」エラーを生成する."""
    return ConfigurationError(f"malformed configuration: {detail}")


class EnumMapping(Mapping[str, int]):
    """シンボル名 → 整数コードの不変マッピング.

    定義順を保持し、同じ内容の ``dict`` と等価に比較される。
    逆引き（コード → シンボル名）は ``reverse`` で参照する。

    Examples:
        >>> states = EnumMapping.build({"abc": 1, "def": 2})
        >>> states == {"abc": 1, "def": 2}
        True
        >>> states.reverse[2]
        'def'

    """

    __slots__ = ("_forward", "_reverse")

    def __init__(self, pairs: Iterable[tuple[str, int]]) -> None:
        forward = dict(pairs)
        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType({code: name for name, code in forward.items()})

    @classmethod
    def build(cls, raw: Any) -> EnumMapping:
        """設定値を検証して EnumMapping を構築する.

        Args:
            raw: ``Mapping[str, int]`` または ``(name, code)`` ペアのイテラブル

        Returns:
            検証済みの EnumMapping

        Raises:
            ConfigurationError: 空、型不正、シンボル名・コードの重複がある場合

        """
        pairs = _to_pairs(raw)
        if not pairs:
            raise malformed("enum mapping is empty")

        for name, code in pairs:
            if not isinstance(name, str) or not name.isidentifier():
                msg = f"enum name {name!r} is not an identifier string"
                raise malformed(msg)
            # bool は int のサブクラスだが、コードとしては認めない
            if not isinstance(code, int) or isinstance(code, bool):
                msg = f"code {code!r} for {name!r} is not an integer"
                raise malformed(msg)

        seen_names: list[str] = []
        seen_codes: list[int] = []
        for name, code in pairs:
            if name in seen_names:
                raise malformed(f"duplicate enum name {name!r}")
            if code in seen_codes:
                raise malformed(f"duplicate code {code!r}")
            seen_names.append(name)
            seen_codes.append(code)

        return cls(pairs)

    @property
    def reverse(self) -> Mapping[int, str]:
        """コード → シンボル名の逆引きマッピング."""
        return self._reverse

    def __getitem__(self, name: str) -> int:
        return self._forward[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"EnumMapping({dict(self._forward)!r})"


def _to_pairs(raw: Any) -> list[tuple[Any, Any]]:
    """Mapping またはペアのイテラブルを (name, code) のリストに変換する."""
    if isinstance(raw, Mapping):
        return list(raw.items())

    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        msg = f"enum mapping must be a mapping of names to codes, got {type(raw).__name__}"
        raise malformed(msg)

    pairs: list[tuple[Any, Any]] = []
    for item in raw:
        if not isinstance(item, tuple) or len(item) != 2:
            msg = f"enum mapping entry {item!r} is not a (name, code) pair"
            raise malformed(msg)
        pairs.append(item)
    return pairs
