"""
Errors raised while compiling filtering rules
"""

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def quote(text: str) -> str:
    """Double-quote text, escaping non-printable characters as \\xNN or \\uNNNN"""
    parts = []
    for char in text:
        code = ord(char)
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif code < 0x80:
            parts.append(f"\\x{code:02x}")
        elif code <= 0xFFFF:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


class RuleParseError(ValueError):
    """Base class for rule string errors"""


class RuleSyntaxError(RuleParseError):
    """A rule has a ``:`` separator with nothing on one side"""

    def __init__(self, rule: str):
        super().__init__("bad syntax")
        self.rule = rule


class UnsupportedKeywordError(RuleParseError):
    """A level keyword is not recognized"""

    def __init__(self, keyword: str):
        super().__init__(f"unsupported keyword: {quote(keyword)}")
        self.keyword = keyword
