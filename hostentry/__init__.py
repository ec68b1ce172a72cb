"""
hostentry - 声明式管理 hosts 文件中的单个主机名映射
"""

__version__ = "1.0.0"
__author__ = "hostentry Project"

from hostentry.config import Config
from hostentry.errors import InvalidArgumentError
from hostentry.models import DesiredState, Ensure, HostEntry, ObservedState, OpaqueLine
from hostentry.resource import HostEntryResource

__all__ = [
    "HostEntryResource",
    "Config",
    "DesiredState",
    "Ensure",
    "HostEntry",
    "InvalidArgumentError",
    "ObservedState",
    "OpaqueLine",
]
