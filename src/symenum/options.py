"""EnumOptions: symbolic_enum の登録オプション."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from symenum.exceptions import ConfigurationError


class EnumOptions(BaseModel):
    """登録オプション.

    Attributes:
        array: True の場合、フィールドはコードの配列を保持する
        disable_scopes: True の場合、スコープを生成しない
        disable_setters: True の場合、セッターと変更メソッドを生成しない

    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    array: bool = False
    disable_scopes: bool = False
    disable_setters: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> EnumOptions:
        """オプション辞書を検証して EnumOptions を生成する.

        未知のキーを先にすべて検査し、その後に値の型を検査する。

        Args:
            options: オプション名 → 値

        Returns:
            検証済みの EnumOptions

        Raises:
            ConfigurationError: 未知のキー、または値が範囲外の場合

        """
        options = dict(options or {})

        for key in options:
            if key not in cls.model_fields:
                msg = f"unrecognized option: {key}"
                raise ConfigurationError(msg)

        try:
            return cls.model_validate(options)
        except PydanticValidationError as exc:
            key = exc.errors()[0]["loc"][0]
            msg = f"invalid option value for {key}"
            raise ConfigurationError(msg) from exc
