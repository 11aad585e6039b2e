"""exprtree - 중위/전위/후위 수식 분석기."""

from exprtree.core import (
    Analysis,
    ExpressionError,
    ExpressionParser,
    Node,
    Notation,
    analyze,
    build_from_postfix,
    detect_notation,
    in_order,
    infix_to_postfix,
    post_order,
    pre_order,
    prefix_to_postfix,
    validate,
)

__version__ = "0.1.0"
