"""Key extraction — find identifiers that follow a dot in arbitrary text.

``Strings.NewsTitle`` and ``{x:Bind Strings.Save}`` both yield a candidate
key.  This is a lexical heuristic, not a parser: any word after a ``.`` is a
candidate, including member accesses and file extensions that happen to
appear in the text.  Matching against the reference catalog is what turns a
candidate into a real usage.
"""

from __future__ import annotations

import re

# ``\w`` in a str pattern is ``str.isalnum()`` plus ``_``.  Combining marks
# such as U+093E (DEVANAGARI VOWEL SIGN AA) are not alphanumeric there, so
# they end a key even though Unicode counts them as Alphabetic.  Matches never
# overlap, so scanning resumes right after each candidate and a key can
# never contain a dot.
_KEY_RE = re.compile(r"\.(\w*)")


def extract_keys(text: str, *, keep_empty: bool = False) -> set[str]:
    """Return the set of candidate keys found in *text*.

    A candidate is the maximal run of word characters immediately after a
    ``.``.  A dot followed by a non-word character (or the end of text)
    produces an empty candidate, which is discarded unless *keep_empty* is
    set.

    >>> sorted(extract_keys("Foo.Bar baz.Qux_1 ...Edge"))
    ['Bar', 'Edge', 'Qux_1']
    """
    keys = {m.group(1) for m in _KEY_RE.finditer(text)}
    if not keep_empty:
        keys.discard("")
    return keys
