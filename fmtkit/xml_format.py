# -*- coding: utf-8 -*-
"""XML 重新缩进 — 纯函数，无 UI 依赖

两步:
    1. 用 lxml 做良构性校验，出错直接返回 XmlError，不产生输出
    2. 与解析结果无关的文本扫描：在每个 >< 边界断行，
       按行的形状（开标签 / 闭标签 / 同行开闭 / 其他）推算缩进深度
第二步是启发式的，对混合内容（文本与元素交错）会保留原有的行形状。
"""

import re

from lxml import etree

from .results import FormatResult, XmlError

INDENT_UNIT = "  "

# 标签之间的空白
_INTER_TAG_WS = re.compile(r">\s*<")
# > 与 < 之间的断点
_BOUNDARY = re.compile(r"(?<=>)(?=<)")

# 同一行内有开有闭:  <a>text</a>
_INLINE_CLOSED = re.compile(r".+</\w[^>]*>\Z")
# 纯闭标签:  </a>
_CLOSING = re.compile(r"</\w")
# 开标签（非自闭合）:  <a>  <a x="1">  <a>text
_OPENING = re.compile(r"<\w[^>]*(?<!/)>.*\Z")

# libxml2 消息末尾自带的位置
_POSITION_SUFFIX = re.compile(r",\s*line \d+,\s*column \d+\s*\Z")


def check_xml(text: str):
    """良构性校验，成功返回 None，失败返回 XmlError。"""
    # 输入已是解码后的文本，固定按 UTF-8 解析，忽略文档里的 encoding 声明
    parser = etree.XMLParser(encoding="utf-8", resolve_entities=False,
                             no_network=True)
    try:
        etree.fromstring(text.encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        line, column = e.position if e.position else (None, None)
        message = _POSITION_SUFFIX.sub("", e.msg or str(e))
        return XmlError(message, line, column)
    return None


def split_tag_lines(text: str):
    """压缩标签间空白，并在每个 >< 边界断开。"""
    clean = _INTER_TAG_WS.sub("><", text).strip()
    return _BOUNDARY.split(clean)


def indent_lines(lines, indent: str = INDENT_UNIT) -> str:
    """单次前向扫描，按行形状维护缩进深度 pad。"""
    out = []
    pad = 0
    for node in lines:
        step = 0
        if _INLINE_CLOSED.search(node):
            step = 0
        elif _CLOSING.match(node):
            # 多余的闭标签不让深度变成负数
            if pad > 0:
                pad -= 1
        elif _OPENING.match(node):
            step = 1
        out.append(indent * pad + node)
        pad += step
    return "\n".join(out).strip()


def reindent(text: str, indent: str = INDENT_UNIT) -> FormatResult:
    """校验并重新缩进 XML。空白输入返回空结果。"""
    if not text.strip():
        return FormatResult(text="")

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    error = check_xml(text.strip())
    if error is not None:
        return FormatResult.failure(error)
    return FormatResult(text=indent_lines(split_tag_lines(text), indent))
