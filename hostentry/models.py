"""
hostentry 数据模型
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from hostentry.errors import InvalidArgumentError


class Ensure(str, Enum):
    """映射的期望存在状态"""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def parse(cls, value: Union[str, "Ensure"]) -> "Ensure":
        """
        按名称解析（不区分大小写）

        异常:
            InvalidArgumentError: 如果值不是 Present 或 Absent
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise InvalidArgumentError(
            f"无效的 ensure 值: {value}. 必须是 Present 或 Absent"
        )


def normalize_comment(comment: Optional[str]) -> Optional[str]:
    """
    把注释规范为解析器输出的形式 "# <单空格连接的文本>"

    空注释（包括只有 '#'）返回 None
    """
    if comment is None:
        return None
    words = comment.strip().lstrip('#').split()
    if not words:
        return None
    return f"# {' '.join(words)}"


@dataclass(frozen=True)
class OpaqueLine:
    """
    不被解释的行（空行、纯空白行或注释行），原样写回

    属性:
        text: 原始行文本
    """

    text: str

    def to_hosts_line(self) -> str:
        return self.text


@dataclass(frozen=True)
class HostEntry:
    """
    代表 hosts 文件中的单个条目行

    属性:
        ip_address: IP 地址（不做格式校验）
        hostnames: 按书写顺序排列的主机名，可能为空
        comment: 以 '#' 开头的行尾注释
        raw: 解析时的原始文本；未修改的条目按原文写回
    """

    ip_address: str
    hostnames: Tuple[str, ...] = ()
    comment: Optional[str] = None
    raw: Optional[str] = field(default=None, compare=False, repr=False)

    @property
    def is_multi_hostname(self) -> bool:
        return len(self.hostnames) > 1

    def has_hostname(self, hostname: str) -> bool:
        """精确匹配（不做子串匹配）"""
        return hostname in self.hostnames

    def without_hostname(self, hostname: str) -> "HostEntry":
        """
        移除该主机名的所有出现，保留 IP 和注释

        返回:
            不带原始文本的新条目，写回时使用规范格式
        """
        remaining = tuple(name for name in self.hostnames if name != hostname)
        return HostEntry(
            ip_address=self.ip_address,
            hostnames=remaining,
            comment=self.comment
        )

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <IP>\t<主机名>[\t<主机名>...][\t# <注释>]

        返回:
            格式化的 hosts 文件行
        """
        if self.raw is not None:
            return self.raw
        fields = [self.ip_address, *self.hostnames]
        if self.comment:
            fields.append(self.comment)
        return '\t'.join(fields)

    def __str__(self) -> str:
        return f"{' '.join(self.hostnames)} -> {self.ip_address}"


HostsLine = Union[OpaqueLine, HostEntry]


@dataclass(frozen=True)
class DesiredState:
    """
    资源的期望状态

    属性:
        host_name: 要管理的主机名
        ip_address: 目标 IP（ensure 为 Present 时必填）
        comment: 新增条目时写入的注释
        ensure: 期望存在状态
    """

    host_name: str
    ip_address: Optional[str] = None
    comment: Optional[str] = None
    ensure: Ensure = Ensure.PRESENT

    def __post_init__(self) -> None:
        object.__setattr__(self, "ensure", Ensure.parse(self.ensure))


@dataclass(frozen=True)
class ObservedState:
    """从 hosts 文件得出的当前状态，从不缓存"""

    host_name: str
    ip_address: Optional[str] = None
    comment: Optional[str] = None
    ensure: Ensure = Ensure.ABSENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hostName": self.host_name,
            "ipAddress": self.ip_address,
            "comment": self.comment,
            "ensure": self.ensure.value,
        }
