"""
条目定位模块

所有主机名判断都使用同一条规则：主机名列表中存在与目标完全相等的元素。
"""

from typing import Iterator, Optional, Sequence, Tuple

from hostentry.models import HostEntry, HostsLine


def find_entries(
    lines: Sequence[HostsLine],
    hostname: str
) -> Iterator[Tuple[int, HostEntry]]:
    """
    自上而下产出所有列出该主机名的条目

    参数:
        lines: 解析后的行序列
        hostname: 目标主机名

    返回:
        (行索引, 条目) 的迭代器
    """
    for index, line in enumerate(lines):
        if isinstance(line, HostEntry) and line.has_hostname(hostname):
            yield index, line


def find_entry(
    lines: Sequence[HostsLine],
    hostname: str
) -> Optional[Tuple[int, HostEntry]]:
    """返回第一个匹配的条目（先出现者优先），没有则返回 None"""
    return next(find_entries(lines, hostname), None)
