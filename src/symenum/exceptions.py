"""symenum 例外クラス."""


class SymenumError(Exception):
    """symenum の基底例外."""


class ConfigurationError(SymenumError):
    """列挙定義（フィールド・マッピング・オプション）の設定エラー."""


class ValidationError(SymenumError, ValueError):
    """セッターに列挙範囲外の値が代入された."""


class UnknownCodeError(SymenumError, LookupError):
    """保存済みコードに対応するシンボル名が存在しない."""
