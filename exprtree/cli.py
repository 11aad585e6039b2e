"""
명령줄 실행기.

  exprtree "a+b*c"                 수식 하나 (여러 개도 가능)
  exprtree -f expressions.txt      파일의 각 줄을 수식으로
  exprtree -i                      대화형 모드
  echo "*+abc" | exprtree          표준 입력의 각 줄을 수식으로

종료 코드: 0 = 모두 성공, 1 = 실패한 수식이 하나라도 있음, 2 = 옵션 오류
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from exprtree.config import FORMATS, LOG_LEVELS, Settings
from exprtree.core import Analysis, analyze
from exprtree.display import format_json, format_report

logger = logging.getLogger(__name__)

PROMPT = "수식> "
EXIT_WORDS = {"quit", "exit"}
SEPARATOR = "━" * 64


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprtree",
        description="중위/전위/후위 수식의 표기법을 판별하고 수식 트리를 만듭니다.",
    )
    parser.add_argument("expressions", nargs="*", metavar="EXPR", help="분석할 수식")
    parser.add_argument("-f", "--file", type=Path, help="한 줄에 수식 하나씩 적힌 파일")
    parser.add_argument("-i", "--interactive", action="store_true", help="대화형 모드")
    parser.add_argument("--format", dest="output_format", choices=FORMATS, help="출력 형식")
    parser.add_argument(
        "--no-tree", dest="show_tree", action="store_false", default=None,
        help="수식 트리 그림을 출력하지 않음",
    )
    parser.add_argument(
        "--ascii", dest="ascii_tree", action="store_true", default=None,
        help="트리를 ASCII 문자로 그림",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="로그 레벨")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """명령줄에서 준 옵션만 환경 변수 설정 위에 덮어씀."""
    overrides = {
        field: getattr(args, field)
        for field in ("log_level", "output_format", "ascii_tree", "show_tree")
        if getattr(args, field) is not None
    }
    return dataclasses.replace(base, **overrides)


def render(analysis: Analysis, settings: Settings) -> str:
    if settings.output_format == "json":
        return format_json(analysis)
    return format_report(analysis, show_tree=settings.show_tree, use_ascii=settings.ascii_tree)


def run_batch(expressions: Iterable[str], settings: Settings) -> int:
    """수식을 차례로 분석. 하나라도 실패하면 1."""
    failures = 0
    for index, text in enumerate(expressions):
        if settings.output_format == "text" and index > 0:
            print(SEPARATOR)

        analysis = analyze(text)
        if not analysis.ok:
            failures += 1
        print(render(analysis, settings))

    return 1 if failures else 0


def run_interactive(settings: Settings) -> int:
    print("수식을 입력하세요. 끝내려면 quit 또는 exit.")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break

        text = line.strip()
        if not text:
            print("수식을 입력해 주세요.")
            continue
        if text.lower() in EXIT_WORDS:
            break

        print(render(analyze(text), settings))
    return 0


def _non_blank(lines: Iterable[str]) -> list[str]:
    return [line for line in lines if line.strip()]


def _read_lines(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8") as handle:
        return _non_blank(handle.read().splitlines())


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args, Settings.from_env())
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(settings.log_level)
    logger.debug("설정: %s", settings)

    if args.interactive:
        return run_interactive(settings)

    lines: list[str] = list(args.expressions)
    if args.file is not None:
        try:
            lines += _read_lines(args.file)
        except OSError as exc:
            parser.error(f"파일을 읽을 수 없습니다: {args.file} ({exc.strerror})")

    if not args.expressions and args.file is None:
        if sys.stdin.isatty():
            return run_interactive(settings)
        lines = _non_blank(sys.stdin.read().splitlines())

    return run_batch(lines, settings)


if __name__ == "__main__":
    sys.exit(main())
