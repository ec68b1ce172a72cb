"""
Hosts 文件读写模块，支持原子性更新
"""

import codecs
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from hostentry.models import HostsLine
from hostentry.parser import parse_text, render_lines, uses_crlf

ENCODING = 'utf-8'
ENCODING_ERRORS = 'surrogateescape'


class HostsFileManager:
    """
    管理 hosts 文件的整文件读取和原子性写入

    使用原子性文件操作（临时文件 + 重命名）防止文件损坏。
    不做跨进程加锁，并发写入者可能相互覆盖。
    """

    def __init__(
        self,
        hosts_path: Union[str, Path],
        logger: Optional[logging.Logger] = None
    ):
        """
        初始化 hosts 文件管理器

        参数:
            hosts_path: 已解析好的 hosts 文件路径
            logger: 日志记录器实例
        """
        self.hosts_path = Path(hosts_path)
        self.logger = logger or logging.getLogger('hostentry')
        self.has_bom = False

    def read(self) -> List[HostsLine]:
        """
        读取并解析整个 hosts 文件

        以字节读取后按 UTF-8 解码：不转换换行符，无法解码的字节
        （如 ANSI 编码的注释）用 surrogateescape 保留，写回时原样还原。
        开头的 UTF-8 BOM 被去掉并记录，写回时补上。

        返回:
            按物理行顺序排列的解析结果

        异常:
            FileNotFoundError: 如果 hosts 文件不存在
            PermissionError: 如果没有读取权限
        """
        try:
            data = self.hosts_path.read_bytes()
        except FileNotFoundError:
            self.logger.error(f"Hosts 文件不存在: {self.hosts_path}")
            raise
        except PermissionError:
            self.logger.error(f"读取 hosts 文件权限被拒绝: {self.hosts_path}")
            raise
        except OSError as e:
            self.logger.error(f"读取 hosts 文件时出错: {e}")
            raise

        self.has_bom = data.startswith(codecs.BOM_UTF8)
        if self.has_bom:
            data = data[len(codecs.BOM_UTF8):]

        lines = parse_text(data.decode(ENCODING, errors=ENCODING_ERRORS))
        self.logger.debug(f"从 {self.hosts_path} 读取了 {len(lines)} 行")
        return lines

    def _encode(self, lines: Sequence[HostsLine]) -> bytes:
        rendered = render_lines(lines, crlf=uses_crlf(lines))
        content = ''.join(f"{text}\n" for text in rendered)
        data = content.encode(ENCODING, errors=ENCODING_ERRORS)
        if self.has_bom:
            data = codecs.BOM_UTF8 + data
        return data

    def write(self, lines: Sequence[HostsLine]) -> None:
        """
        原子性写入整个 hosts 文件

        参数:
            lines: 要写入的完整行序列；为空时写入空文件

        异常:
            PermissionError: 如果没有写入 hosts 文件的权限
            OSError: 如果文件系统操作失败
        """
        data = self._encode(lines)

        try:
            # 写入临时文件（同一目录）
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.hosts_path.parent,
                prefix='.hosts.tmp.'
            )

            try:
                with os.fdopen(temp_fd, 'wb') as f:
                    f.write(data)

                # mkstemp 创建的文件权限为 0600，沿用原文件的权限
                if self.hosts_path.exists():
                    shutil.copymode(self.hosts_path, temp_path)

                # 原子性替换（同一文件系统内有效）
                os.replace(temp_path, self.hosts_path)
                self.logger.debug(f"已写入 {len(lines)} 行到 {self.hosts_path}")

            except BaseException:
                # 出错时清理临时文件
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise

        except PermissionError:
            self.logger.error(f"写入 hosts 文件权限被拒绝: {self.hosts_path}")
            raise
        except OSError as e:
            self.logger.error(f"更新 hosts 文件失败: {e}")
            raise
