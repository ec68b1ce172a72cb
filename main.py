#!/usr/bin/env python3
"""
hostentry - 主入口点

声明式管理 hosts 文件中的单个主机名映射。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostentry 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostentry.cli import app


def main() -> None:
    """主入口点"""
    app()


if __name__ == '__main__':
    main()
