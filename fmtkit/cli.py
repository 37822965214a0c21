# -*- coding: utf-8 -*-
"""fmtkit 命令行

用法:
    fmtkit json data.json                     # 美化（2 空格缩进）
    fmtkit json data.json --style sorted --indent 4
    fmtkit json data.json --style table       # 表格投影（制表符分隔）
    fmtkit json data.json --style tree        # 树形投影（默认展开两层）
    fmtkit json - --validate < data.json      # 只做语法验证
    fmtkit xml feed.xml -o feed.pretty.xml
    fmtkit sql query.sql --keyword-case lower --no-compact

退出码: 0 成功，1 格式错误，2 参数 / 文件错误
"""

import argparse
import sys

from . import json_table, json_tree
from .json_format import (
    INDENT_WIDTHS, STYLE_TABLE, STYLE_TREE, STYLES, FormatOptions,
    reformat, validate_json,
)
from .results import FormatFailed
from .sql_format import KEYWORD_CASES, format_sql
from .xml_format import reindent

EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_USAGE = 2


# ── 日志 ──────────────────────────────────────────────────────

def log_ok(msg):
    print(f"  [OK] {msg}", file=sys.stderr)


def log_err(msg):
    print(f"  [ERROR] {msg}", file=sys.stderr)


# ── 输入 / 输出 ──────────────────────────────────────────────

def _read_input(path):
    if path in (None, "-"):
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_output(text, path):
    if not path:
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
        if text and not text.endswith("\n"):
            f.write("\n")
    log_ok(f"已写入: {path}")


# ── 子命令 ────────────────────────────────────────────────────

def _run_json(args, text):
    if args.validate:
        ok, msg = validate_json(text)
        (log_ok if ok else log_err)(msg.replace("\n", " "))
        return "", ok

    options = FormatOptions(
        style=args.style,
        indent_width=args.indent,
        sort_keys=args.sort_keys,
        escape_non_ascii=args.escape_unicode,
    )
    result = reformat(text, options)
    formatted = result.unwrap()
    if not formatted:
        return "", True

    if args.style == STYLE_TABLE:
        return json_table.render_table_text(json_table.project(result.value)), True
    if args.style == STYLE_TREE:
        lines = json_tree.render_tree_lines(json_tree.project(result.value))
        return "\n".join(lines), True
    return formatted, True


def _run_xml(args, text):
    return reindent(text, indent=" " * args.indent_unit).unwrap(), True


def _run_sql(args, text):
    case = None if args.keyword_case == "preserve" else args.keyword_case
    return format_sql(text, keyword_case=case, indent_width=args.indent,
                      compact=not args.no_compact), True


def build_parser():
    ap = argparse.ArgumentParser(
        prog="fmtkit", description="JSON / XML / SQL 格式化工具")
    sub = ap.add_subparsers(dest="command", required=True)

    def add_common(p):
        p.add_argument("file", nargs="?", default="-",
                       help="输入文件（省略或 - 表示标准输入）")
        p.add_argument("-o", "--output", help="写入文件而不是标准输出")

    p_json = sub.add_parser("json", help="JSON 美化 / 压缩 / 排序 / 投影")
    add_common(p_json)
    p_json.add_argument("--style", choices=STYLES, default="pretty")
    p_json.add_argument("--indent", type=int, choices=INDENT_WIDTHS, default=2)
    p_json.add_argument("--sort-keys", action="store_true", help="递归排序键名")
    p_json.add_argument("--escape-unicode", action="store_true",
                        help="非 ASCII 字符转义为 \\uXXXX")
    p_json.add_argument("--validate", action="store_true", help="只验证语法")
    p_json.set_defaults(handler=_run_json)

    p_xml = sub.add_parser("xml", help="XML 校验并重新缩进")
    add_common(p_xml)
    p_xml.add_argument("--indent-unit", type=int, default=2,
                       help="每层缩进的空格数（默认 2）")
    p_xml.set_defaults(handler=_run_xml)

    p_sql = sub.add_parser("sql", help="SQL 排版并压缩行数")
    add_common(p_sql)
    p_sql.add_argument("--keyword-case", default="upper",
                       choices=[c for c in KEYWORD_CASES if c] + ["preserve"])
    p_sql.add_argument("--indent", type=int, choices=INDENT_WIDTHS, default=2)
    p_sql.add_argument("--no-compact", action="store_true",
                       help="保留 sqlparse 的原始排版")
    p_sql.set_defaults(handler=_run_sql)
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        log_err(f"读取失败: {e}")
        return EXIT_USAGE

    try:
        out, ok = args.handler(args, text)
    except FormatFailed as e:
        log_err(f"{e.error.kind.upper()} 错误: {e}")
        return EXIT_FORMAT_ERROR
    except ValueError as e:
        log_err(str(e))
        return EXIT_FORMAT_ERROR
    if not ok:
        return EXIT_FORMAT_ERROR

    try:
        _write_output(out, args.output)
    except OSError as e:
        log_err(f"写入失败: {e}")
        return EXIT_USAGE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
