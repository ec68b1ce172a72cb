"""
hostentry 异常类型
"""


class InvalidArgumentError(ValueError):
    """期望状态无效（用户输入错误），在访问文件之前抛出"""
