"""Escaping of grammar kind names into safe database identifiers.

Only generated table/column names pass through here. Argument values are
quoted by ``treetrap.trap.facts`` instead.
"""

RESERVED_KEYWORDS = frozenset(
    {
        "boolean",
        "case",
        "date",
        "float",
        "int",
        "key",
        "of",
        "order",
        "ref",
        "string",
        "subtype",
        "type",
        "unique",
        "varchar",
    }
)

_CHAR_NAMES = {
    "{": "lbrace",
    "}": "rbrace",
    "<": "langle",
    ">": "rangle",
    "[": "lbracket",
    "]": "rbracket",
    "(": "lparen",
    ")": "rparen",
    "|": "pipe",
    "=": "equal",
    "~": "tilde",
    "?": "question",
    "`": "backtick",
    "^": "caret",
    "!": "bang",
    "#": "hash",
    "%": "percent",
    "&": "ampersand",
    ".": "dot",
    ",": "comma",
    "/": "slash",
    ":": "colon",
    ";": "semicolon",
    '"': "dquote",
    "*": "star",
    "+": "plus",
    "-": "minus",
    "@": "at",
}


def escape_name(name: str) -> str:
    """Return ``name`` rewritten as a valid identifier.

    Punctuation becomes words, letters are lower-cased, a leading underscore
    gains an ``underscore`` prefix, and a result equal to a reserved keyword
    gets a trailing ``__``.
    """
    parts: list[str] = []
    if name.startswith("_"):
        parts.append("underscore")
    for c in name:
        parts.append(_CHAR_NAMES.get(c) or c.lower())
    result = "".join(parts)
    if result in RESERVED_KEYWORDS:
        result += "__"
    return result


def node_type_name(kind: str, named: bool) -> str:
    """Unescaped table name for a node type; anonymous kinds get ``_unnamed``."""
    return kind if named else f"{kind}_unnamed"
