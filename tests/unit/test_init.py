from __future__ import annotations

import chainhttp


def test_version() -> None:
    assert isinstance(chainhttp.__version__, str)


def test_all_exports_exist() -> None:
    for name in chainhttp.__all__:
        assert hasattr(chainhttp, name)
