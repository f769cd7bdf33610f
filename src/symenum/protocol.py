"""列挙フィールドを持つクラスが提供すべきインターフェース."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AttributeStore(Protocol):
    """インスタンス側: 生の属性値の読み書きと永続化."""

    def read_attribute(self, name: str) -> Any:
        """保存済みの生の値を返す（未設定は None）."""
        ...

    def write_attribute(self, name: str, value: Any) -> None:
        """生の値を書き込む（永続化はしない）."""
        ...

    def update_attributes(self, **values: Any) -> Any:
        """値を書き込んで永続化する."""
        ...


@runtime_checkable
class ScopeRegistry(Protocol):
    """クラス側: 名前付き検索条件の登録."""

    def scope(self, name: str, fn: Callable[[], Any]) -> Any:
        """名前付き検索条件を登録する."""
        ...
