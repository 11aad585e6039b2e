"""
╔══════════════════════════════════════════════════════════════════╗
║      exprtree - 중위 / 전위 / 후위 수식 분석기 · 수식 트리 생성기      ║
╚══════════════════════════════════════════════════════════════════╝

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
★ 이 파일의 전체 흐름 (5단계)

  [입력] "(a + b) * c"   ← 사용자가 입력한 수식 (표기법은 모름)
      │
      ▼
  ① VALIDATOR (검사기)
      공백 제거 + 모든 문자가 피연산자/연산자/괄호인지 확인
      → "(a+b)*c"
      │
      ▼
  ② DETECTOR (표기법 판별기)
      첫 글자와 마지막 글자만 보고 중위/전위/후위 판별
      → Notation.INFIX
      │
      ▼
  ③ CONVERTER (변환기)
      표기법에 맞는 변환기로 후위(postfix) 문자열을 만듦
        중위 → Shunting-yard 알고리즘
        전위 → 오른쪽에서 왼쪽으로 스택 축약
        후위 → 그대로
      → "ab+c*"
      │
      ▼
  ④ TREE BUILDER (트리 생성기)
      후위 문자열을 스택으로 읽어 이진 수식 트리 조립
      →        Node('*')
               ├─ Node('+')
               │   ├─ Node('a')
               │   └─ Node('b')
               └─ Node('c')
      │
      ▼
  ⑤ VISITOR (순회기)
      트리를 돌아다니며 세 가지 표기법을 다시 만듦
        PreOrderVisitor  → "*+abc"
        PostOrderVisitor → "ab+c*"
        InOrderVisitor   → "((a+b)*c)"

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
★ 지원 범위

  피연산자 : 영문자 또는 숫자 "한 글자" (a, b, x, 3 ...)
  연산자   : +  -  *  /  ^
  괄호     : (  )

  수식의 값을 계산하지는 않음. 트리의 잎은 기호일 뿐임.
"""

from __future__ import annotations

import logging
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════
# PART 1. 연산자 표 · 토큰 분류
#
# ★ 이 분석기는 모든 것을 "문자 한 글자" 단위로 다룸.
#   그래서 토큰 = 문자 하나, 토큰의 종류(TokenType) = classify() 의 결과.
#
# ★ 문자 분류 규칙은 아래 표에 전부 적혀 있음.
#   피연산자는 ASCII 영문자/숫자만 인정함. 한글, é 같은 글자는 InvalidCharacter.
# ══════════════════════════════════════════════════════════════════

# 연산자 → 우선순위 (숫자가 클수록 먼저 묶임)
PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
}

OPERATORS = frozenset(PRECEDENCE)
OPERAND_CHARS = frozenset(string.ascii_letters + string.digits)


def is_operator(ch: str) -> bool:
    return ch in OPERATORS


def is_operand(ch: str) -> bool:
    return ch in OPERAND_CHARS


def precedence(ch: str) -> int:
    """연산자의 우선순위. 연산자가 아니면 -1."""
    return PRECEDENCE.get(ch, -1)


class TokenType(Enum):
    """
    ★ 토큰의 "종류"를 나타내는 열거형(Enum).

    수식 안의 모든 문자는 아래 네 가지 중 하나여야 함.
    어느 것에도 속하지 않으면 InvalidCharacter 오류.
    """
    OPERAND  = auto()   # 피연산자   a, b, 3 ...
    OPERATOR = auto()   # 연산자     + - * / ^
    LPAREN   = auto()   # 왼쪽 괄호  (
    RPAREN   = auto()   # 오른쪽 괄호 )


_PAREN_MAP: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def classify(ch: str) -> Optional[TokenType]:
    """
    문자 하나를 TokenType으로 분류. 지원하지 않는 문자면 None.

    예) classify("a") → TokenType.OPERAND
        classify("^") → TokenType.OPERATOR
        classify("%") → None
    """
    if is_operand(ch):
        return TokenType.OPERAND
    if is_operator(ch):
        return TokenType.OPERATOR
    return _PAREN_MAP.get(ch)


class Stack:
    """
    변환기와 트리 생성기가 쓰는 스택 (리스트의 끝 = 스택의 꼭대기).

    호출마다 새로 만들어서 쓰고 버림. 여러 호출이 공유하지 않음.
    """

    def __init__(self):
        self._items: list = []

    def push(self, item) -> None:
        self._items.append(item)

    def pop(self):
        return self._items.pop()

    def peek(self):
        """꼭대기 원소를 꺼내지 않고 봄."""
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Stack({self._items!r})"


# ══════════════════════════════════════════════════════════════════
# PART 2. 오류 종류
#
# ★ 분석 도중 문제가 생기면 즉시 아래 오류 중 하나를 발생시키고 멈춤.
#   부분 결과는 없음. 재시도도 없음.
#
# ★ 모든 오류는 ExpressionError를 상속받음.
#   → 호출하는 쪽은 "except ExpressionError" 하나로 전부 잡을 수 있음.
#   → kind 속성에 오류 이름("EmptyParentheses" 등)이 들어 있음.
#
# ★ position 은 공백을 제거한 수식 기준, 0부터 센 위치.
# ══════════════════════════════════════════════════════════════════

class ExpressionError(Exception):
    """수식 분석 오류의 부모 클래스."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__


class EmptyExpression(ExpressionError):
    """공백을 제거하고 나니 아무것도 남지 않음."""

    def __init__(self):
        super().__init__("수식이 비어 있습니다. 수식을 입력해 주세요.")


class InvalidCharacter(ExpressionError):
    """피연산자/연산자/괄호 어디에도 속하지 않는 문자."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"지원하지 않는 문자: {char!r} (위치 {position}). "
            f"지원: 영문자/숫자 한 글자, + - * / ^, ( )"
        )


class EmptyParentheses(ExpressionError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f"빈 괄호 '()'가 있습니다 (위치 {position}).")


class MissingOperatorBeforeParen(ExpressionError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f"괄호 앞에 연산자가 없습니다 (위치 {position}).")


class DanglingOperatorBeforeParen(ExpressionError):
    """연산자 바로 뒤에 ')'가 옴 → 오른쪽 피연산자가 없음."""

    def __init__(self, position: int, operator: str):
        self.position = position
        self.operator = operator
        super().__init__(
            f"연산자 {operator!r} 뒤에 피연산자가 없습니다 (위치 {position})."
        )


class UnmatchedClosingParen(ExpressionError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f"여는 괄호 '('가 없습니다 (위치 {position}).")


class UnmatchedOpeningParen(ExpressionError):
    def __init__(self):
        super().__init__("닫는 괄호 ')'가 없습니다.")


class MissingOperand(ExpressionError):
    """연산자 두 개가 연달아 옴 (단, 두 번째가 '-'인 경우는 통과)."""

    def __init__(self, prev: str, char: str):
        self.prev = prev
        self.char = char
        super().__init__(f"{prev!r}와 {char!r} 사이에 피연산자가 없습니다.")


class MissingOperator(ExpressionError):
    """피연산자 두 개가 연달아 옴. 예) "ab" """

    def __init__(self, prev: str, char: str, position: int):
        self.prev = prev
        self.char = char
        self.position = position
        super().__init__(
            f"{prev!r}와 {char!r} 사이에 연산자가 없습니다 (위치 {position})."
        )


class InsufficientOperands(ExpressionError):
    """
    연산자를 처리할 때 스택에 피연산자가 2개 미만.

    전위 변환에서는 원래 수식의 위치를 함께 알려줌.
    트리 생성 단계의 입력은 변환된 후위 문자열일 수 있어서 위치는 None.
    """

    def __init__(self, operator: str, position: Optional[int] = None):
        self.operator = operator
        self.position = position
        where = f" (위치 {position})" if position is not None else ""
        super().__init__(f"연산자 {operator!r}에 필요한 피연산자가 부족합니다{where}.")


class UnbalancedExpression(ExpressionError):
    """스택이 마지막에 정확히 하나로 줄어들지 않음."""

    def __init__(self, notation: Optional[Notation] = None):
        self.notation = notation
        label = f"{notation.label} " if notation is not None else ""
        super().__init__(f"잘못된 {label}수식: 피연산자와 연산자의 개수가 맞지 않습니다.")


class UnknownNotation(ExpressionError):
    def __init__(self, notation: object = None):
        self.notation = notation
        super().__init__("수식의 표기법을 판별할 수 없습니다.")


class UnexpectedFailure(ExpressionError):
    """
    분류되지 않은 예외를 analyze() 경계에서 감싼 것.
    내부 정보(예외 메시지, 트레이스백)는 메시지에 넣지 않고 로그로만 남김.
    """

    def __init__(self):
        super().__init__("예상하지 못한 오류가 발생했습니다.")


# ══════════════════════════════════════════════════════════════════
# PART 3. VALIDATOR · DETECTOR
#
# ★ 표기법 판별은 "양 끝 문자"만 봄 (안쪽은 보지 않음):
#
#   첫 글자   마지막 글자    결과
#   ───────   ──────────    ────────
#   연산자X   연산자O       후위   예) "ab+"
#   연산자O   연산자X       전위   예) "+ab"
#   그 외                   중위   예) "(a+b)", "a", "+a+"
#
#   단순한 규칙이라 틀릴 수도 있음. 예) "a+" 는 후위로 판별되고,
#   트리 생성 단계에서 InsufficientOperands 로 걸러짐.
# ══════════════════════════════════════════════════════════════════

class Notation(Enum):
    INFIX   = "infix"
    PREFIX  = "prefix"
    POSTFIX = "postfix"

    @property
    def label(self) -> str:
        """화면 표시용 이름."""
        return _NOTATION_LABELS[self]


_NOTATION_LABELS: dict[Notation, str] = {
    Notation.INFIX:   "중위",
    Notation.PREFIX:  "전위",
    Notation.POSTFIX: "후위",
}


def normalize(text: str) -> str:
    """모든 공백 문자(스페이스, 탭, 줄바꿈 ...)를 제거."""
    return "".join(text.split())


def validate(text: str) -> str:
    """
    ★ 검사기의 진입점.

    공백 제거 → 빈 수식 검사 → 문자 검사.
    통과하면 공백이 제거된 수식을 반환.

    Raises:
      EmptyExpression  : 공백뿐이거나 빈 문자열
      InvalidCharacter : 지원하지 않는 문자
    """
    expression = normalize(text)
    if not expression:
        raise EmptyExpression()
    for pos, ch in enumerate(expression):
        if classify(ch) is None:
            raise InvalidCharacter(ch, pos)
    return expression


def detect_notation(expression: str) -> Notation:
    """검사를 통과한(비어 있지 않은) 수식의 표기법을 판별. 실패하지 않음."""
    first, last = expression[0], expression[-1]

    if is_operator(last) and not is_operator(first):
        notation = Notation.POSTFIX
    elif is_operator(first) and not is_operator(last):
        notation = Notation.PREFIX
    else:
        notation = Notation.INFIX

    logger.debug("표기법 판별: %r → %s", expression, notation.value)
    return notation


# ══════════════════════════════════════════════════════════════════
# PART 4. CONVERTER  (중위/전위 → 후위)
#
# ★ Shunting-yard (조차장) 알고리즘 - 중위 → 후위
#
#   왼쪽부터 한 글자씩 읽으면서:
#     피연산자  → 바로 출력
#     '('       → 스택에 쌓음
#     ')'       → '('가 나올 때까지 스택에서 꺼내 출력, '('는 버림
#     연산자    → 스택 꼭대기의 우선순위가 "같거나 높은" 동안 꺼내 출력,
#                 그 다음 자기 자신을 쌓음
#   끝나면 스택에 남은 것을 전부 출력.
#
#   예) "a+b*c"
#     a → 출력 "a"
#     + → 스택 [+]
#     b → 출력 "ab"
#     * → +(1) < *(2) 이므로 그냥 쌓음, 스택 [+, *]
#     c → 출력 "abc"
#     끝 → 스택 비우기 → "abc*+"
#
# ★ "같거나 높은"(<=) 비교 때문에 ^ 도 왼쪽부터 묶임.
#   "a^b^c" → "ab^c^"  ( (a^b)^c )
#   수학 관례(오른쪽 결합)와 다름.
#
# ★ 읽는 도중에 문법 오류도 함께 검사함 (빈 괄호, 연산자 누락 등).
# ══════════════════════════════════════════════════════════════════

def infix_to_postfix(expression: str) -> str:
    """
    중위 수식 → 후위 문자열.

    Raises:
      EmptyParentheses, DanglingOperatorBeforeParen, MissingOperatorBeforeParen,
      MissingOperator, MissingOperand, UnmatchedClosingParen, UnmatchedOpeningParen
    """
    output: list[str] = []
    stack = Stack()   # 연산자와 '('를 담음

    for i, ch in enumerate(expression):
        prev = expression[i - 1] if i > 0 else ""
        nxt  = expression[i + 1] if i + 1 < len(expression) else ""

        # 괄호 주변 검사 (문자 종류와 상관없이 먼저 확인)
        if ch == "(" and nxt == ")":
            raise EmptyParentheses(i)
        if is_operator(ch) and nxt == ")":
            raise DanglingOperatorBeforeParen(i, ch)
        if ch == "(" and is_operand(prev):
            raise MissingOperatorBeforeParen(i)

        if is_operand(ch):
            if is_operand(prev):
                raise MissingOperator(prev, ch, i)
            output.append(ch)

        elif ch == "(":
            stack.push(ch)

        elif ch == ")":
            while not stack.is_empty() and stack.peek() != "(":
                output.append(stack.pop())
            if stack.is_empty():
                raise UnmatchedClosingParen(i)
            stack.pop()   # '(' 버림

        elif is_operator(ch):
            # '-'는 다른 연산자 뒤에 와도 여기서는 통과시킴 ("a+-b").
            # 단항 연산자로 처리하는 것은 아니라서 보통 트리 생성에서 실패함.
            if is_operator(prev) and ch != "-":
                raise MissingOperand(prev, ch)
            while (
                not stack.is_empty()
                and stack.peek() != "("
                and precedence(ch) <= precedence(stack.peek())
            ):
                output.append(stack.pop())
            stack.push(ch)

    while not stack.is_empty():
        top = stack.pop()
        if top == "(":
            raise UnmatchedOpeningParen()
        output.append(top)

    postfix = "".join(output)
    logger.debug("중위 → 후위: %r → %r", expression, postfix)
    return postfix


def prefix_to_postfix(expression: str) -> str:
    """
    ★ 전위 수식 → 후위 문자열 (오른쪽에서 왼쪽으로 읽음)

      피연산자 → 문자열 그대로 스택에 쌓음
      연산자   → 두 개 꺼내서 (첫째 + 둘째 + 연산자)로 합쳐 다시 쌓음

    예) "*+abc"
      c, b, a 순서로 쌓임         스택 [c, b, a]
      + → "a" + "b" + "+"         스택 [c, ab+]
      * → "ab+" + "c" + "*"       스택 [ab+c*]

    괄호는 무시함. 끝났을 때 스택에 정확히 하나가 남아야 함.
    """
    stack = Stack()

    for i in range(len(expression) - 1, -1, -1):
        ch = expression[i]
        if is_operand(ch):
            stack.push(ch)
        elif is_operator(ch):
            if len(stack) < 2:
                raise InsufficientOperands(ch, i)
            op1 = stack.pop()
            op2 = stack.pop()
            stack.push(op1 + op2 + ch)

    if len(stack) != 1:
        raise UnbalancedExpression(Notation.PREFIX)

    postfix = stack.pop()
    logger.debug("전위 → 후위: %r → %r", expression, postfix)
    return postfix


# ══════════════════════════════════════════════════════════════════
# PART 5. 수식 트리 · TREE BUILDER
#
# ★ 노드 하나 = 글자 하나.
#   잎(leaf)     : 자식 없음, 피연산자
#   가지(branch) : 자식 정확히 2개 (left, right), 연산자
#
# ★ 후위 문자열로 트리 만들기:
#   피연산자 → 잎 노드를 스택에 쌓음
#   연산자   → 스택에서 두 개 꺼냄
#              먼저 꺼낸 것 = 오른쪽 자식, 나중에 꺼낸 것 = 왼쪽 자식
#
#   아래에서 위로 쌓아 올리므로 순환이나 공유 노드가 생길 수 없음.
# ══════════════════════════════════════════════════════════════════

@dataclass
class Node:
    label: str
    left:  Optional[Node] = None
    right: Optional[Node] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def accept(self, visitor: NodeVisitor):
        """자식이 없으면 visit_operand, 하나라도 있으면 visit_operator 호출."""
        if self.is_leaf:
            return visitor.visit_operand(self)
        return visitor.visit_operator(self)


def build_from_postfix(postfix: str) -> Node:
    """
    후위 문자열 → 트리의 루트 노드.

    Raises:
      InsufficientOperands : 연산자에 필요한 노드가 2개 미만
      UnbalancedExpression : 끝났을 때 스택에 노드가 1개가 아님
    """
    stack = Stack()

    for ch in postfix:
        if is_operand(ch):
            stack.push(Node(ch))
        elif is_operator(ch):
            if len(stack) < 2:
                raise InsufficientOperands(ch)
            right = stack.pop()
            left  = stack.pop()
            stack.push(Node(ch, left, right))

    if len(stack) != 1:
        raise UnbalancedExpression(Notation.POSTFIX)
    return stack.pop()


# ══════════════════════════════════════════════════════════════════
# PART 6. VISITOR  (트리 → 세 가지 표기법)
#
# ★ 순회 순서만 다르고 나머지는 같음:
#
#   PreOrderVisitor  : 나 → 왼쪽 → 오른쪽     "*+abc"
#   PostOrderVisitor : 왼쪽 → 오른쪽 → 나     "ab+c*"
#   InOrderVisitor   : 왼쪽 → 나 → 오른쪽     "((a+b)*c)"
#
# ★ 중위 순회는 괄호가 없으면 구조가 사라지므로,
#   연산자 노드의 결과를 전부 괄호로 감쌈 (잎은 감싸지 않음).
#   그래서 원래 입력 "(a+b)*c" 와 글자가 똑같지는 않지만 구조는 같음.
#
# ★ 재귀 호출 대신 작업 스택(Stack)으로 순회함:
#   visit_* 는 문자열을 바로 만들지 않고 "조각 목록"을 돌려줌.
#     조각 = 출력할 문자열 또는 아직 펼치지 않은 자식 노드
#   render() 가 조각을 뒤집어 스택에 쌓고, 꺼낼 때마다
#     문자열 → 출력에 붙임
#     노드   → 다시 조각 목록으로 펼침
#   트리가 아무리 깊어도 파이썬 재귀 한도에 걸리지 않음.
#
# ★ 없는 노드(None)는 빈 문자열. 세 순회 모두 실패하지 않음.
# ══════════════════════════════════════════════════════════════════

class NodeVisitor(ABC):
    """모든 순회 Visitor의 부모 클래스."""

    def render(self, node: Optional[Node]) -> str:
        """순회의 진입점. 루트 노드를 넘기면 됨."""
        output: list[str] = []
        stack = Stack()
        stack.push(node)

        while not stack.is_empty():
            item = stack.pop()
            if item is None:
                continue
            if isinstance(item, str):
                output.append(item)
                continue
            for part in reversed(item.accept(self)):
                stack.push(part)

        return "".join(output)

    @abstractmethod
    def visit_operand(self, node: Node) -> list:
        pass

    @abstractmethod
    def visit_operator(self, node: Node) -> list:
        pass


class PreOrderVisitor(NodeVisitor):

    def visit_operand(self, node: Node) -> list:
        return [node.label]

    def visit_operator(self, node: Node) -> list:
        return [node.label, node.left, node.right]


class PostOrderVisitor(NodeVisitor):

    def visit_operand(self, node: Node) -> list:
        return [node.label]

    def visit_operator(self, node: Node) -> list:
        return [node.left, node.right, node.label]


class InOrderVisitor(NodeVisitor):

    def visit_operand(self, node: Node) -> list:
        return [node.label]

    def visit_operator(self, node: Node) -> list:
        parts = [node.left, node.label, node.right]
        if is_operator(node.label):
            return ["(", *parts, ")"]
        return parts


def pre_order(node: Optional[Node]) -> str:
    return PreOrderVisitor().render(node)


def post_order(node: Optional[Node]) -> str:
    return PostOrderVisitor().render(node)


def in_order(node: Optional[Node]) -> str:
    return InOrderVisitor().render(node)


# ══════════════════════════════════════════════════════════════════
# PART 7. 전체 파이프라인
#
# ★ 두 가지 사용법:
#
#   1. ExpressionParser  : 오류를 예외로 그대로 올려보냄
#        parser = ExpressionParser("(a+b)*c")
#        root   = parser.build_tree()
#
#   2. analyze()         : 예외를 올리지 않고 Analysis 결과로 돌려줌
#        result = analyze("(a+b)*c")
#        if result.ok: print(result.prefix)
#        else:         print(result.error.message)
# ══════════════════════════════════════════════════════════════════

def _identity(expression: str) -> str:
    return expression


class ExpressionParser:
    """
    생성할 때 검사와 표기법 판별을 끝냄.
    build_tree()를 호출하면 후위 변환 → 트리 생성을 진행.
    """

    # 표기법 → 후위 변환 함수
    _TO_POSTFIX: dict[Notation, Callable[[str], str]] = {
        Notation.POSTFIX: _identity,
        Notation.INFIX:   infix_to_postfix,
        Notation.PREFIX:  prefix_to_postfix,
    }

    def __init__(self, text: str):
        self.expression = validate(text)
        self.notation   = detect_notation(self.expression)

    def to_postfix(self) -> str:
        converter = self._TO_POSTFIX.get(self.notation)
        if converter is None:
            raise UnknownNotation(self.notation)
        return converter(self.expression)

    def build_tree(self) -> Node:
        return build_from_postfix(self.to_postfix())


@dataclass
class Analysis:
    """
    ★ analyze()의 결과.

    성공: notation, root, postfix/prefix/infix 가 채워지고 error 는 None.
    실패: error 만 채워짐. 나머지는 비어 있음 (부분 결과 없음).
    """
    source:     str
    expression: Optional[str] = None
    notation:   Optional[Notation] = None
    root:       Optional[Node] = None
    postfix:    str = ""
    prefix:     str = ""
    infix:      str = ""
    error:      Optional[ExpressionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def analyze(text: str) -> Analysis:
    """
    ★ 메인 함수: 수식 문자열 → Analysis

    검사 → 판별 → 후위 변환 → 트리 생성 → 세 가지 순회 를 순서대로 실행.
    어떤 단계에서든 오류가 나면 그 자리에서 멈추고 실패 결과를 돌려줌.
    이 함수는 예외를 올려보내지 않음.

    사용 예:
      analyze("a+b*c").postfix    → "abc*+"
      analyze("*+abc").infix      → "((a+b)*c)"
      analyze("a()").error.kind   → "EmptyParentheses"
    """
    try:
        parser = ExpressionParser(text)
        root = parser.build_tree()
        result = Analysis(
            source=text,
            expression=parser.expression,
            notation=parser.notation,
            root=root,
            postfix=post_order(root),
            prefix=pre_order(root),
            infix=in_order(root),
        )
    except ExpressionError as exc:
        logger.info("수식 거부 %r: %s (%s)", text, exc.kind, exc.message)
        return Analysis(source=text, error=exc)
    except Exception:
        logger.exception("수식 분석 중 예상하지 못한 오류: %r", text)
        return Analysis(source=text, error=UnexpectedFailure())

    logger.debug(
        "분석 완료 %r: %s, 후위=%r 전위=%r 중위=%r",
        result.expression, result.notation.value,
        result.postfix, result.prefix, result.infix,
    )
    return result
