"""
Go 문자열 리터럴 유틸리티

import 경로 리터럴을 해석(unquote)하고 다시 인용(quote)하는 함수들을 제공합니다.
Go의 strconv.Unquote / strconv.Quote와 같은 결과를 내도록 작성되었습니다.
"""

_SIMPLE_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
    "\\": 0x5C,
    '"': 0x22,
}

_QUOTE_ESCAPES = {
    0x07: "\\a",
    0x08: "\\b",
    0x0C: "\\f",
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
    0x0B: "\\v",
}

# import 경로에 허용되지 않는 ASCII 구두점
_INVALID_IMPORT_CHARS = frozenset('!"#$%&\'()*,:;<=>?[\\]^`{|}')


def go_unquote(literal: str) -> str:
    """
    Go 문자열 리터럴("..." 또는 `...`)을 해석합니다.

    Args:
        literal: 따옴표를 포함한 리터럴 원문

    Returns:
        해석된 문자열

    Raises:
        ValueError: 올바른 문자열 리터럴이 아닌 경우

    Examples:
        >>> go_unquote('"example.com/old/pkg"')
        'example.com/old/pkg'

        >>> go_unquote('`raw/path`')
        'raw/path'
    """
    if len(literal) < 2:
        raise ValueError(f"invalid string literal: {literal!r}")

    quote = literal[0]
    if quote != literal[-1]:
        raise ValueError(f"invalid string literal: {literal!r}")

    body = literal[1:-1]
    if quote == "`":
        if "`" in body:
            raise ValueError(f"invalid raw string literal: {literal!r}")
        # raw string 내부의 캐리지 리턴은 버려진다
        return body.replace("\r", "")

    if quote != '"':
        raise ValueError(f"invalid string literal: {literal!r}")

    out = bytearray()
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch == '"' or ch == "\n":
            raise ValueError(f"invalid string literal: {literal!r}")
        if ch != "\\":
            out += ch.encode("utf-8")
            i += 1
            continue

        if i + 1 >= n:
            raise ValueError(f"invalid escape in {literal!r}")
        esc = body[i + 1]
        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            i += 2
        elif esc in "01234567":
            digits = body[i + 1:i + 4]
            if len(digits) != 3 or any(d not in "01234567" for d in digits):
                raise ValueError(f"invalid octal escape in {literal!r}")
            value = int(digits, 8)
            if value > 255:
                raise ValueError(f"octal escape value > 255 in {literal!r}")
            out.append(value)
            i += 4
        elif esc in "xuU":
            width = {"x": 2, "u": 4, "U": 8}[esc]
            digits = body[i + 2:i + 2 + width]
            if len(digits) != width:
                raise ValueError(f"invalid escape in {literal!r}")
            try:
                value = int(digits, 16)
            except ValueError:
                raise ValueError(f"invalid escape in {literal!r}") from None
            if esc == "x":
                out.append(value)
            else:
                if value > 0x10FFFF or 0xD800 <= value < 0xE000:
                    raise ValueError(f"escape is invalid Unicode code point in {literal!r}")
                out += chr(value).encode("utf-8")
            i += 2 + width
        else:
            raise ValueError(f"unknown escape sequence in {literal!r}")

    return out.decode("utf-8", errors="replace")


def go_quote(value: str) -> str:
    """
    문자열을 Go의 strconv.Quote 형식의 리터럴로 변환합니다.

    Examples:
        >>> go_quote("example.com/new/pkg")
        '"example.com/new/pkg"'

        >>> go_quote('a"b')
        '"a\\\\"b"'
    """
    parts = ['"']
    for ch in value:
        code = ord(ch)
        if ch == '"' or ch == "\\":
            parts.append("\\" + ch)
        elif code in _QUOTE_ESCAPES:
            parts.append(_QUOTE_ESCAPES[code])
        elif ch.isprintable():
            parts.append(ch)
        elif code < 0x20 or code == 0x7F:
            parts.append(f"\\x{code:02x}")
        elif code < 0x10000:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def is_valid_import_path(path: str) -> bool:
    """
    Go 파서가 허용하는 import 경로인지 확인합니다.

    빈 문자열, 공백/제어 문자, 일부 ASCII 구두점, U+FFFD를 포함하면 거부합니다.

    Examples:
        >>> is_valid_import_path("example.com/pkg")
        True

        >>> is_valid_import_path("bad path")
        False
    """
    if not path:
        return False
    for ch in path:
        if ch in _INVALID_IMPORT_CHARS or ch == "\ufffd":
            return False
        if ch.isspace() or not ch.isprintable():
            return False
    return True
