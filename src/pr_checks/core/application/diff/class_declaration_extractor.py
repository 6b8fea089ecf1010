"""Regex heuristics that find class declarations in reconstructed diff source.

This is deliberately not a parser. The patterns false-positive on class-like
text inside comments or strings, and miss declarations they do not anticipate
(a class without a ``{`` body borrows the next brace, ``private`` hides
nested declarations on the same line, ...). Expected results are shaped by
these patterns.

Declaration patterns (both ``DOTALL`` so the tail may span lines):

==================  ==========================================================
pattern             used on
==================  ==========================================================
ANY_CLASS           removed source; any ``class Name ... {``
NON_PRIVATE_CLASS   added source; ``class`` at line start, optionally after
                    whitespace, annotations (``@Keep``, ``@Feature(...)``)
                    and the Java/Kotlin modifiers in ``_DECLARATION_PREFIX``,
                    so ``private class`` is not picked up
==================  ==========================================================

Supertype patterns, by file extension (last match wins):

==========  =====================================
extension   pattern
==========  =====================================
``.java``   ``extends <Name>``
other       ``: <Name>`` (Kotlin / Swift style)
==========  =====================================
"""

import re
from pathlib import PurePosixPath

from pr_checks.core.domain.diff import ClassDeclarationMatch

# No "private" here: a private declaration never reaches the class keyword.
_DECLARATION_PREFIX = (
    r"(?:[ \t]|@[\w.]+(?:\([^)]*\))?"
    r"|public|internal|protected|final|abstract|static"
    r"|open|data|sealed|enum|inner|value|annotation)*"
)

ANY_CLASS_DETECTOR = re.compile(r"class\s+([A-Z]\w+)\s*(.*?)\s*\{", re.DOTALL)
NON_PRIVATE_CLASS_DETECTOR = re.compile(
    rf"^{_DECLARATION_PREFIX}class\s+([A-Z]\w+)\s*(.*?)\s*\{{",
    re.MULTILINE | re.DOTALL,
)

_SUPERTYPE_PATTERNS: dict[str, re.Pattern[str]] = {
    ".java": re.compile(r"extends\s+([A-Z]\w+)", re.DOTALL),
}
_DEFAULT_SUPERTYPE_PATTERN = re.compile(r"\s*:\s*([A-Z]\w+)", re.DOTALL)


def extract_class_declarations(
    source: str,
    file_path: str,
    detector: re.Pattern[str] = NON_PRIVATE_CLASS_DETECTOR,
) -> list[ClassDeclarationMatch]:
    """Every declaration ``detector`` finds in ``source``, in order of appearance."""
    return [
        ClassDeclarationMatch(
            class_name=match.group(1),
            supertype=derive_supertype(match.group(2), file_path),
        )
        for match in detector.finditer(source)
    ]


def extract_class_names(source: str, detector: re.Pattern[str] = ANY_CLASS_DETECTOR) -> list[str]:
    return [match.group(1) for match in detector.finditer(source)]


def derive_supertype(declaration_tail: str, file_path: str) -> str | None:
    """Supertype token from the text between the class name and ``{``, if any."""
    pattern = _SUPERTYPE_PATTERNS.get(PurePosixPath(file_path).suffix, _DEFAULT_SUPERTYPE_PATTERN)
    matches = pattern.findall(declaration_tail)
    return matches[-1] if matches else None
