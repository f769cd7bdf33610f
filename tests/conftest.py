"""pytest 共通設定: 列挙フィールドのテスト基盤."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from symenum import Model


class RecordingModel(Model):
    """scope / update_attributes の呼び出しを記録するホスト."""

    saved: list[dict[str, Any]]

    def __init__(self, **attributes: Any) -> None:
        super().__init__(**attributes)
        self.saved = []

    def update_attributes(self, **values: Any) -> Any:
        self.saved.append(values)
        return super().update_attributes(**values)


@pytest.fixture
def host_cls() -> type[Model]:
    """テストごとに新しい Model サブクラスを返す."""

    class Sample(RecordingModel):
        pass

    return Sample


@pytest.fixture
def spy_cls() -> type:
    """scope をモックに差し替えたクラスを返す."""

    class Spy:
        scope = MagicMock()

        def __init__(self) -> None:
            self.read_attribute = MagicMock(return_value=None)
            self.write_attribute = MagicMock()
            self.update_attributes = MagicMock(return_value=True)

    return Spy
