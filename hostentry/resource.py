"""
hosts 条目资源：Get / Test / Set
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from hostentry.errors import InvalidArgumentError
from hostentry.hosts_manager import HostsFileManager
from hostentry.locator import find_entries, find_entry
from hostentry.models import DesiredState, Ensure, HostsLine, ObservedState
from hostentry.mutator import append_entry, remove_hostname, update_hostname


class HostEntryResource:
    """
    把单个主机名映射与 hosts 文件对齐的声明式资源

    每次调用都重新读取文件，调用之间不保留任何状态：
    - get: 查看当前状态
    - test: 判断当前状态是否符合期望状态
    - set: 以最小的行级修改收敛到期望状态
    """

    def __init__(
        self,
        hosts_path: Union[str, Path],
        logger: Optional[logging.Logger] = None
    ):
        """
        初始化资源

        参数:
            hosts_path: 已解析好的 hosts 文件路径
            logger: 日志记录器实例
        """
        self.logger = logger or logging.getLogger('hostentry')
        self.hosts_manager = HostsFileManager(hosts_path, self.logger)

    @staticmethod
    def _observe(lines: List[HostsLine], host_name: str) -> ObservedState:
        match = find_entry(lines, host_name)
        if match is None:
            return ObservedState(host_name=host_name, ensure=Ensure.ABSENT)

        _, entry = match
        return ObservedState(
            host_name=host_name,
            ip_address=entry.ip_address,
            comment=entry.comment,
            ensure=Ensure.PRESENT
        )

    @staticmethod
    def _matches(observed: ObservedState, desired: DesiredState) -> bool:
        # 注释从不参与比较
        if observed.ensure != desired.ensure:
            return False
        if desired.ensure == Ensure.PRESENT:
            return observed.ip_address == desired.ip_address
        return True

    @staticmethod
    def validate(desired: DesiredState) -> None:
        """
        校验期望状态

        异常:
            InvalidArgumentError: 主机名为空或无法写入 hosts 文件，
                或 ensure 为 Present 但没有 IP
        """
        host_name = desired.host_name
        if not host_name:
            raise InvalidArgumentError("必须提供主机名")
        if len(host_name.split()) != 1 or host_name != host_name.strip():
            raise InvalidArgumentError(f"主机名不能包含空白字符: {host_name!r}")
        if host_name.startswith('#'):
            raise InvalidArgumentError(f"主机名不能以 '#' 开头: {host_name!r}")

        if desired.ensure == Ensure.PRESENT:
            if not desired.ip_address:
                raise InvalidArgumentError(
                    f"ensure 为 Present 时必须提供 IP 地址: {host_name}"
                )
            if len(desired.ip_address.split()) != 1 or desired.ip_address.startswith('#'):
                raise InvalidArgumentError(
                    f"IP 地址不是单个字段: {desired.ip_address!r}"
                )

    def get(self, host_name: str) -> ObservedState:
        """
        查看主机名的当前状态

        参数:
            host_name: 要查找的主机名（精确匹配）

        返回:
            找到时为 Present 及其 IP 和注释，否则为 Absent
        """
        observed = self._observe(self.hosts_manager.read(), host_name)
        self.logger.debug(f"当前状态: {observed}")
        return observed

    def test(self, desired: DesiredState) -> bool:
        """
        判断当前状态是否符合期望状态

        ensure 不同时返回 False；ensure 为 Present 时 IP 不同也返回 False。

        返回:
            符合期望状态时返回 True
        """
        observed = self.get(desired.host_name)
        in_desired_state = self._matches(observed, desired)
        self.logger.debug(
            f"{desired.host_name}: 期望 {desired.ensure.value}"
            f"{' ' + desired.ip_address if desired.ip_address else ''}，"
            f"当前 {observed.ensure.value}"
            f"{' ' + observed.ip_address if observed.ip_address else ''}"
            f" -> {'一致' if in_desired_state else '不一致'}"
        )
        return in_desired_state

    def set(self, desired: DesiredState) -> bool:
        """
        以最小的行级修改把 hosts 文件收敛到期望状态

        - 不存在 -> Present: 在文件末尾追加新行
        - Present -> 新 IP: 修改第一个匹配行
        - Present -> Absent: 从所有列出该主机名的行中移除
        - 已经符合期望状态（包括 Absent -> Absent）: 不写文件

        参数:
            desired: 期望状态

        返回:
            文件被改写时返回 True

        异常:
            InvalidArgumentError: 期望状态无效（在访问文件之前）
            OSError: 文件读写失败，原样抛出
        """
        self.validate(desired)

        lines = self.hosts_manager.read()
        observed = self._observe(lines, desired.host_name)

        if self._matches(observed, desired):
            self.logger.info(f"{desired.host_name} 已处于期望状态，无需修改")
            return False

        host_name = desired.host_name

        if desired.ensure == Ensure.PRESENT and observed.ensure == Ensure.ABSENT:
            lines = append_entry(lines, desired.ip_address, host_name, desired.comment)
            self.logger.info(f"已添加主机记录: {host_name} → {desired.ip_address}")

        elif desired.ensure == Ensure.PRESENT:
            index, _ = find_entry(lines, host_name)
            lines = update_hostname(lines, index, host_name, desired.ip_address)
            self.logger.info(
                f"已更新主机记录: {host_name} {observed.ip_address} → {desired.ip_address}"
            )

        else:
            # 逆序移除，前面的索引不受影响
            indexes = [index for index, _ in find_entries(lines, host_name)]
            for index in reversed(indexes):
                lines = remove_hostname(lines, index, host_name)
            self.logger.info(f"已移除主机记录: {host_name}（{len(indexes)} 行）")

        self.hosts_manager.write(lines)
        return True
