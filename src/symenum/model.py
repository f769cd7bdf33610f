"""Model: 列挙フィールドを載せるためのインメモリ基底クラス."""

from __future__ import annotations

from collections.abc import Callable
from inspect import getattr_static
from typing import Any, ClassVar

from symenum.attribute import EnumAttribute


class Model:
    """AttributeStore / ScopeRegistry を満たす最小のホストクラス.

    生の属性値をインスタンスごとの辞書に保持する。永続化は行わないため、
    DB に保存する場合は ``save()`` を、検索を実行する場合は ``where()`` を
    サブクラスで実装する。

    Examples:
        >>> @symbolic_enum("state", {"pending": 1, "shipped": 2})
        ... class Order(Model):
        ...     pass
        >>> order = Order(state="pending")
        >>> order.read_attribute("state")
        1
        >>> Order.shipped()
        {'state': 2}

    """

    __scopes__: ClassVar[dict[str, Callable[[], Any]]] = {}

    def __init__(self, **attributes: Any) -> None:
        self._attributes: dict[str, Any] = {}
        for name, value in attributes.items():
            descriptor = getattr_static(type(self), name, None)
            if isinstance(descriptor, EnumAttribute):
                value = descriptor.encode(value)
            self.write_attribute(name, value)

    def read_attribute(self, name: str) -> Any:
        """生の値を返す（未設定は None）."""
        return self._attributes.get(name)

    def write_attribute(self, name: str, value: Any) -> None:
        """生の値を書き込む."""
        self._attributes[name] = value

    def update_attributes(self, **values: Any) -> Any:
        """生の値を書き込んで ``save()`` の結果を返す."""
        for name, value in values.items():
            self.write_attribute(name, value)
        return self.save()

    def save(self) -> Any:
        """永続化フック. デフォルトは何もせず True を返す."""
        return True

    @classmethod
    def scope(cls, name: str, fn: Callable[[], Any]) -> None:
        """名前付き検索条件を登録し、同名のクラスメソッドを生やす."""
        # スコープ表はクラスごとに持つ
        if "__scopes__" not in cls.__dict__:
            cls.__scopes__ = dict(cls.__scopes__)
        cls.__scopes__[name] = fn

        def run_scope(klass: type[Model]) -> Any:
            return klass.where(**fn())

        run_scope.__name__ = name
        run_scope.__qualname__ = f"{cls.__qualname__}.{name}"
        setattr(cls, name, classmethod(run_scope))

    @classmethod
    def where(cls, **conditions: Any) -> Any:
        """検索条件を受け取る. デフォルトは条件辞書をそのまま返す."""
        return conditions

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self._attributes.items())
        return f"{type(self).__name__}({attrs})"
