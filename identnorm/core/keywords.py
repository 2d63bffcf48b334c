"""
Rust keyword table.

Words that cannot be emitted as plain identifiers and must go through
raw-identifier escaping when rendered.
"""

# Rust reserved words (strict, reserved and edition keywords)
RUST_KEYWORDS = frozenset(
    {
        "as",
        "use",
        "break",
        "const",
        "continue",
        "crate",
        "else",
        "if",
        "enum",
        "extern",
        "false",
        "fn",
        "for",
        "impl",
        "in",
        "let",
        "loop",
        "match",
        "mod",
        "move",
        "mut",
        "pub",
        "ref",
        "return",
        "Self",
        "self",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "type",
        "unsafe",
        "where",
        "while",
        # Reserved for future use
        "abstract",
        "alignof",
        "become",
        "box",
        "do",
        "final",
        "macro",
        "offsetof",
        "override",
        "priv",
        "proc",
        "pure",
        "sizeof",
        "typeof",
        "unsized",
        "virtual",
        "yield",
        # 2018 edition
        "dyn",
        "async",
        "await",
        "try",
    }
)


def is_keyword(text) -> bool:
    """Return True if ``text`` is exactly a Rust keyword (case-sensitive)."""
    if not isinstance(text, str):
        text = text.text
    return text in RUST_KEYWORDS
