"""测试共用的 fixture"""

from pathlib import Path
from typing import Callable, List

import pytest


@pytest.fixture
def make_hosts_file(tmp_path: Path) -> Callable[[List[str]], Path]:
    """按给定行创建 hosts 文件（每行以换行结尾）"""

    def _make(lines: List[str]) -> Path:
        path = tmp_path / "hosts"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _make
