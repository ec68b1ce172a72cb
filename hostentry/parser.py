"""
hosts 文件行解析模块
"""

from typing import List, Sequence

from hostentry.models import HostEntry, HostsLine, OpaqueLine

COMMENT_CHAR = '#'


def parse_line(text: str) -> HostsLine:
    """
    把一行原始文本解析为结构化的行

    空行、纯空白行和以 '#' 开头的行作为不透明行原样保留。
    其余行按空白切分：第一个字段是 IP，随后直到注释标记为止的字段是主机名，
    注释标记之后的内容以单个空格重新连接，前缀为 "# "。
    以 '#' 开头的字段（如 "#note"）同样开始注释，不只是单独的 "#"。

    参数:
        text: 不含换行符 LF 的原始行，CRLF 文件行尾的 CR 保留在原文中

    返回:
        OpaqueLine 或 HostEntry
    """
    tokens = text.split()
    # 切分后为空的行静默跳过，不当作错误
    if not tokens or tokens[0].startswith(COMMENT_CHAR):
        return OpaqueLine(text)

    ip_address = tokens[0]
    hostnames: List[str] = []
    comment_words: List[str] = []
    in_comment = False

    for token in tokens[1:]:
        if in_comment:
            comment_words.append(token)
        elif token.startswith(COMMENT_CHAR):
            in_comment = True
            rest = token.lstrip(COMMENT_CHAR)
            if rest:
                comment_words.append(rest)
        else:
            hostnames.append(token)

    comment = f"{COMMENT_CHAR} {' '.join(comment_words)}" if comment_words else None

    return HostEntry(
        ip_address=ip_address,
        hostnames=tuple(hostnames),
        comment=comment,
        raw=text
    )


def parse_lines(lines: Sequence[str]) -> List[HostsLine]:
    return [parse_line(line) for line in lines]


def split_text(content: str) -> List[str]:
    """
    只按 LF 切分文件内容

    不使用 str.splitlines：它还会在换页符、NEL、行分隔符等字符处断行，
    会改写与修改无关的行。CRLF 文件的 CR 留在每行原文中。
    """
    if not content:
        return []
    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def parse_text(content: str) -> List[HostsLine]:
    """解析整个文件内容，每个物理行对应一个结果"""
    return parse_lines(split_text(content))


def uses_crlf(lines: Sequence[HostsLine]) -> bool:
    """原文中有以 CR 结尾的行时视为 CRLF 文件"""
    return any(line.to_hosts_line().endswith('\r') for line in lines)


def render_lines(lines: Sequence[HostsLine], crlf: bool = False) -> List[str]:
    """
    渲染为不含 LF 的行文本

    crlf 为 True 时，新增或修改过的行也补上 CR，与文件原有换行风格一致。
    """
    rendered = [line.to_hosts_line() for line in lines]
    if crlf:
        rendered = [text if text.endswith('\r') else f"{text}\r" for text in rendered]
    return rendered
