"""
화면 출력 담당 (분석 로직 없음).

  render_tree   : 수식 트리를 옆으로 누운 나무 모양 텍스트로
  format_report : 분석 결과 → 사람이 읽는 보고서
  format_json   : 분석 결과 → JSON 한 줄

실패한 분석은 오류 한 줄만 출력함. 이전 결과나 부분 결과는 보여주지 않음.
"""

from __future__ import annotations

import json
from typing import Optional

from exprtree.core import Analysis, Node, Stack


# 가지 모양 문자 (머리=오른쪽 자식 위, 꼬리=왼쪽 자식 아래)
BOX_BRANCHES: dict[str, str] = {
    "head":  "┌── ",
    "tail":  "└── ",
    "pipe":  "│   ",
    "blank": "    ",
}

ASCII_BRANCHES: dict[str, str] = {
    "head":  "/-- ",
    "tail":  "\\-- ",
    "pipe":  "|   ",
    "blank": "    ",
}


def render_tree(root: Optional[Node], use_ascii: bool = False) -> str:
    """
    ★ 트리를 왼쪽으로 90도 눕힌 모양으로 그림.

    오른쪽 자식이 위, 왼쪽 자식이 아래에 옴.
    예) "(a+b)*c" 의 트리

      │   ┌── c
      └── *
          │   ┌── b
          └── +
              └── a

    재귀 없이 작업 스택으로 그림. 아주 깊은 트리도 그릴 수 있음.
    """
    branches = ASCII_BRANCHES if use_ascii else BOX_BRANCHES
    lines: list[str] = []
    if root is None:
        return ""

    # 작업 = (노드, 앞부분, 꼬리 여부) 또는 완성된 한 줄(str)
    stack = Stack()
    stack.push((root, "", True))
    while not stack.is_empty():
        item = stack.pop()
        if isinstance(item, str):
            lines.append(item)
            continue

        node, prefix, is_tail = item
        if node.left is not None:
            above = branches["blank"] if is_tail else branches["pipe"]
            stack.push((node.left, prefix + above, True))
        stack.push(prefix + (branches["tail"] if is_tail else branches["head"]) + node.label)
        if node.right is not None:
            below = branches["pipe"] if is_tail else branches["blank"]
            stack.push((node.right, prefix + below, False))

    return "\n".join(lines)


def format_report(analysis: Analysis, show_tree: bool = True, use_ascii: bool = False) -> str:
    if not analysis.ok:
        return f"수식 오류: {analysis.error.message}"

    lines = [
        f"입력: {analysis.source}",
        f"표기법: {analysis.notation.label}",
        "",
        f"후위: {analysis.postfix}",
        f"전위: {analysis.prefix}",
        f"중위: {analysis.infix}",
    ]
    if show_tree:
        lines += ["", "수식 트리:", render_tree(analysis.root, use_ascii=use_ascii)]
    return "\n".join(lines)


def format_json(analysis: Analysis) -> str:
    """분석 결과를 JSON 객체 한 줄로. 실패하면 표기법/결과는 null."""
    if analysis.ok:
        payload = {
            "expression": analysis.expression,
            "notation": analysis.notation.value,
            "postfix": analysis.postfix,
            "prefix": analysis.prefix,
            "infix": analysis.infix,
            "error": None,
        }
    else:
        payload = {
            "expression": analysis.source,
            "notation": None,
            "postfix": None,
            "prefix": None,
            "infix": None,
            "error": {"kind": analysis.error.kind, "message": analysis.error.message},
        }
    return json.dumps(payload, ensure_ascii=False)
