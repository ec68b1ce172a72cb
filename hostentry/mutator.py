"""
行级修改模块

每个函数都返回新的行列表，不修改传入的列表。
"""

from typing import List, Optional, Sequence

from hostentry.models import HostEntry, HostsLine, normalize_comment


def append_entry(
    lines: Sequence[HostsLine],
    ip_address: str,
    hostname: str,
    comment: Optional[str] = None
) -> List[HostsLine]:
    """
    在文件末尾追加新条目，不触碰已有行

    格式: <IP>\t<主机名>[\t# <注释>]
    """
    entry = HostEntry(
        ip_address=ip_address,
        hostnames=(hostname,),
        comment=normalize_comment(comment)
    )
    return [*lines, entry]


def _target_entry(lines: Sequence[HostsLine], index: int, hostname: str) -> HostEntry:
    line = lines[index]
    if not isinstance(line, HostEntry) or not line.has_hostname(hostname):
        raise ValueError(f"第 {index + 1} 行不包含主机名 {hostname}")
    return line


def update_hostname(
    lines: Sequence[HostsLine],
    index: int,
    hostname: str,
    ip_address: str
) -> List[HostsLine]:
    """
    把指定行上的主机名改为映射到新 IP

    单主机名行整行替换，原注释保留。
    多主机名行只移除该主机名（其余主机名仍映射到原 IP，注释保留），
    并在其后紧接插入新行，保持原有的查找优先级。

    参数:
        lines: 解析后的行序列
        index: 包含该主机名的行索引
        hostname: 要更新的主机名
        ip_address: 新 IP

    返回:
        更新后的行列表

    异常:
        ValueError: 如果该行不包含此主机名
    """
    entry = _target_entry(lines, index, hostname)
    result = list(lines)

    if not entry.is_multi_hostname:
        result[index] = HostEntry(
            ip_address=ip_address,
            hostnames=(hostname,),
            comment=entry.comment
        )
        return result

    replacement: List[HostsLine] = []
    remaining = entry.without_hostname(hostname)
    if remaining.hostnames:
        replacement.append(remaining)
    replacement.append(HostEntry(ip_address=ip_address, hostnames=(hostname,)))
    result[index:index + 1] = replacement
    return result


def remove_hostname(
    lines: Sequence[HostsLine],
    index: int,
    hostname: str
) -> List[HostsLine]:
    """
    从指定行移除主机名

    单主机名行整行删除；多主机名行只移除该主机名，IP 和注释不变。
    移除后没有主机名的行也被删除，不留下只有 IP 的行。

    异常:
        ValueError: 如果该行不包含此主机名
    """
    entry = _target_entry(lines, index, hostname)
    result = list(lines)

    remaining = entry.without_hostname(hostname)
    if remaining.hostnames:
        result[index] = remaining
    else:
        del result[index]
    return result
