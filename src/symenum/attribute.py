"""EnumAttribute: 列挙フィールドのゲッター/セッター記述子."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from symenum.exceptions import UnknownCodeError, ValidationError

if TYPE_CHECKING:
    from symenum.mapping import EnumMapping


class EnumAttribute:
    """列挙フィールドのデータ記述子.

    インスタンスから読むと保存済みコードをシンボル名に変換して返し、
    代入するとシンボル名を検証してコードとして書き込む。
    生の値の読み書きはインスタンスの ``read_attribute`` / ``write_attribute`` に委譲する。

    クラスから読んだ場合は記述子自身を返す。ただし静的アクセサと同名
    （``states`` のように複数形がフィールド名と一致する）の場合はマッピングを返す。

    """

    def __init__(
        self,
        field: str,
        mapping: EnumMapping,
        *,
        array: bool = False,
        writable: bool = True,
        expose_mapping: bool = False,
    ) -> None:
        self.field = field
        self.mapping = mapping
        self.array = array
        self.writable = writable
        self.expose_mapping = expose_mapping

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self.mapping if self.expose_mapping else self
        return self.decode(instance.read_attribute(self.field))

    def __set__(self, instance: Any, value: Any) -> None:
        if not self.writable:
            msg = f"can't set attribute {self.field!r}"
            raise AttributeError(msg)
        instance.write_attribute(self.field, self.encode(value))

    def __delete__(self, instance: Any) -> None:
        msg = f"can't delete attribute {self.field!r}"
        raise AttributeError(msg)

    def decode(self, raw: Any) -> Any:
        """保存済みの生の値をシンボル名（配列モードではそのリスト）に変換する.

        Raises:
            UnknownCodeError: マッピングに存在しないコードが保存されている場合

        """
        if raw is None:
            return None
        if self.array:
            if not isinstance(raw, (list, tuple)):
                msg = f"unknown enum codes for {self.field}: {raw!r}"
                raise UnknownCodeError(msg)
            return [self._name_for(code) for code in raw]
        return self._name_for(raw)

    def encode(self, value: Any) -> Any:
        """シンボル名（配列モードではそのリスト）を保存用のコードに変換する.

        Raises:
            ValidationError: 列挙範囲外の値の場合

        """
        if value is None:
            return None

        if self.array:
            if not isinstance(value, (list, tuple)) or not all(self._is_member(v) for v in value):
                msg = f"invalid enum array value: {value!r}"
                raise ValidationError(msg)
            return [self.mapping[v] for v in value]

        if not self._is_member(value):
            msg = f"invalid enum value: {value!r}"
            raise ValidationError(msg)
        return self.mapping[value]

    def _is_member(self, value: Any) -> bool:
        return isinstance(value, str) and value in self.mapping

    def _name_for(self, code: Any) -> str:
        try:
            return self.mapping.reverse[code]
        except (KeyError, TypeError):
            msg = f"unknown enum code for {self.field}: {code!r}"
            raise UnknownCodeError(msg) from None

    def __repr__(self) -> str:
        mode = "array" if self.array else "scalar"
        return f"EnumAttribute({self.field!r}, {dict(self.mapping)!r}, {mode})"
