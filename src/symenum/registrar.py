"""symbolic_enum: クラスに列挙フィールドを登録する."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from symenum.attribute import EnumAttribute
from symenum.exceptions import ConfigurationError
from symenum.inflector import pluralize
from symenum.mapping import EnumMapping, malformed
from symenum.options import EnumOptions

logger = logging.getLogger(__name__)

REGISTRY_ATTR = "__symbolic_enums__"


def register(cls: type, field: str, mapping: Any, **options: Any) -> type:
    """クラスに列挙フィールドを登録する.

    検証をすべて終えてからメンバーを生成するため、失敗時にクラスは変更されない。

    生成されるメンバー:
        - ``pluralize(field)``: マッピングを返す静的アクセサ
        - ``field``: ゲッター/セッター（EnumAttribute）
        - 値ごとの ``is_<name>()`` 述語と ``set_<name>()`` 変更メソッド
          （配列モードの ``set_<name>()`` は ``[code]`` を保存する）
        - 値ごとの ``cls.scope(name, ...)`` 呼び出し

    Args:
        cls: 対象クラス
        field: フィールド名
        mapping: シンボル名 → 整数コード
        **options: ``array`` / ``disable_scopes`` / ``disable_setters``

    Returns:
        対象クラス（同一オブジェクト）

    Raises:
        ConfigurationError: 設定が不正、またはメンバー名が既存のものと衝突する場合

    Examples:
        >>> class Order(Model):
        ...     pass
        >>> _ = register(Order, "state", {"pending": 1, "shipped": 2})
        >>> Order.states
        EnumMapping({'pending': 1, 'shipped': 2})

    """
    try:
        if not isinstance(cls, type):
            msg = f"target must be a class, got {type(cls).__name__}"
            raise malformed(msg)
        if not isinstance(field, str) or not field.isidentifier():
            raise malformed(f"field {field!r} is not an identifier string")

        enum_mapping = EnumMapping.build(mapping)
        enum_options = EnumOptions.from_mapping(options)
        _check_clashes(cls, field, enum_mapping, enum_options)
    except ConfigurationError as exc:
        logger.debug("rejected symbolic enum on %r: %s", cls, exc)
        raise

    _generate(cls, field, enum_mapping, enum_options)
    logger.debug(
        "registered symbolic enum %s.%s (%d values, %s)",
        cls.__name__,
        field,
        len(enum_mapping),
        enum_options,
    )
    return cls


def register_config(cls: type, params: Any) -> type:
    """緩い形式の設定辞書からフィールドを登録する.

    最初のキーがフィールド名、その値がマッピング、残りのキーがオプションとなる。

    Examples:
        >>> _ = register_config(Parcel, {"tags": {"gift": 1, "fragile": 2}, "array": True})

    Raises:
        ConfigurationError: 設定の形が不正な場合

    """
    field, mapping, options = parse_config(params)
    return register(cls, field, mapping, **options)


def parse_config(params: Any) -> tuple[str, Any, dict[str, Any]]:
    """緩い形式の設定辞書を (field, mapping, options) に分解する.

    Raises:
        ConfigurationError: フィールドとマッピングの組が 1 つでない場合

    """
    if not isinstance(params, Mapping) or not params:
        msg = "argument has to be a mapping of a field to its enum mapping, with optional options"
        raise malformed(msg)

    items = list(params.items())
    field, mapping = items[0]
    if not isinstance(field, str) or not _is_mapping_like(mapping):
        raise malformed(f"first key {field!r} has to be a field with an enum mapping")

    options: dict[str, Any] = {}
    for key, value in items[1:]:
        if key not in EnumOptions.model_fields and isinstance(value, Mapping):
            raise malformed(f"only one field may be registered at a time, got {key!r} as well")
        options[key] = value
    return field, mapping, options


def symbolic_enum(params: Any = None, mapping: Any = None, /, **options: Any) -> Callable[[type], type]:
    """列挙フィールドを登録するクラスデコレータ.

    Examples:
        >>> @symbolic_enum("state", {"pending": 1, "shipped": 2}, disable_scopes=True)
        ... class Order(Model):
        ...     pass

        緩い形式の設定辞書も受け付ける:

        >>> @symbolic_enum({"tags": {"gift": 1, "fragile": 2}, "array": True})
        ... class Parcel(Model):
        ...     pass

    """
    if mapping is None and not options and isinstance(params, Mapping):

        def decorator(cls: type) -> type:
            return register_config(cls, params)

        return decorator

    def decorator(cls: type) -> type:
        return register(cls, params, mapping, **options)

    return decorator


def symbolic_enums(cls: type) -> Mapping[str, EnumMapping]:
    """クラスに登録済みの列挙フィールド（フィールド名 → マッピング）を返す."""
    return MappingProxyType(getattr(cls, REGISTRY_ATTR, {}))


def member_names(name: str, options: EnumOptions) -> list[str]:
    """列挙値 1 つに対して生成されるメンバー名."""
    names = [f"is_{name}"]
    if not options.disable_setters:
        names.append(f"set_{name}")
    if not options.disable_scopes:
        names.append(name)
    return names


def _is_mapping_like(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _check_clashes(cls: type, field: str, mapping: EnumMapping, options: EnumOptions) -> None:
    """生成予定のメンバー名が既存の名前、および同じ登録で生成する名前と衝突しないか全値について検査する."""
    taken = set(dir(cls)) | {field, pluralize(field)}
    for name in mapping:
        generated = member_names(name, options)
        if taken.intersection(generated):
            msg = f"'{name}' clashes with existing members"
            raise ConfigurationError(msg)
        taken.update(generated)


def _generate(cls: type, field: str, mapping: EnumMapping, options: EnumOptions) -> None:
    """検証済みの定義からメンバーを生成してクラスに設定する."""
    accessor = pluralize(field)
    attribute = EnumAttribute(
        field,
        mapping,
        array=options.array,
        writable=not options.disable_setters,
        expose_mapping=accessor == field,
    )
    if accessor != field:
        setattr(cls, accessor, mapping)
    setattr(cls, field, attribute)

    for name, code in mapping.items():
        _install(cls, _make_predicate(field, name, code, array=options.array))
        if not options.disable_setters:
            _install(cls, _make_mutator(field, name, code, array=options.array))
        if not options.disable_scopes:
            cls.scope(name, _make_filter(field, code))

    # 登録表はクラスごとに持つ（親の表は変更しない）
    registry = dict(getattr(cls, REGISTRY_ATTR, {}))
    registry[field] = mapping
    setattr(cls, REGISTRY_ATTR, registry)


def _install(cls: type, fn: Callable[..., Any]) -> None:
    fn.__qualname__ = f"{cls.__qualname__}.{fn.__name__}"
    fn.__module__ = cls.__module__
    setattr(cls, fn.__name__, fn)


def _make_predicate(field: str, name: str, code: int, *, array: bool) -> Callable[[Any], bool]:
    if array:

        def predicate(self: Any) -> bool:
            raw = self.read_attribute(field)
            return isinstance(raw, (list, tuple)) and code in raw

    else:

        def predicate(self: Any) -> bool:
            return self.read_attribute(field) == code

    predicate.__name__ = f"is_{name}"
    predicate.__doc__ = f"{field} が {name!r} (= {code}) なら True を返す."
    return predicate


def _make_mutator(field: str, name: str, code: int, *, array: bool) -> Callable[[Any], Any]:
    def mutator(self: Any) -> Any:
        return self.update_attributes(**{field: [code] if array else code})

    mutator.__name__ = f"set_{name}"
    if array:
        mutator.__doc__ = f"{field} を [{name!r}] (= [{code}]) に置き換えて永続化する."
    else:
        mutator.__doc__ = f"{field} を {name!r} (= {code}) に更新して永続化する."
    return mutator


def _make_filter(field: str, code: int) -> Callable[[], dict[str, int]]:
    def scope_filter() -> dict[str, int]:
        return {field: code}

    return scope_filter
