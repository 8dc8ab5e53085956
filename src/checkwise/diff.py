"""Human-readable diffs for string sequences and text."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import zip_longest

from diff_match_patch import diff_match_patch

logger = logging.getLogger(__name__)

DEFAULT_MAX_MISMATCHES = 3

_EQUAL_MARKER = " = "
_CHANGED_MARKERS = (" ! ", " ! ")
_EXTRA_GOT_MARKERS = ("-! ", " !+")
_EXTRA_EXPECTED_MARKERS = ("+! ", " !-")

_ANSI_INSERT = "\x1b[32m"
_ANSI_DELETE = "\x1b[31m"
_ANSI_RESET = "\x1b[0m"


def produce_diff(
    expected: Sequence[str],
    got: Sequence[str],
    max_mismatches: int = DEFAULT_MAX_MISMATCHES,
) -> tuple[str, bool]:
    """Interleave *expected* and *got* line by line for side-by-side reading.

    Equal lines appear once, tagged ``eg[i]``. Unequal lines appear as an
    ``e[i]`` row followed by a ``g[i]`` row. Indices past the end of the
    shorter sequence always count as unequal. The report stops after
    *max_mismatches* consecutive unequal indices.

    Returns:
        A tuple of (report, all_equal).
    """
    len_expected = len(expected)
    len_got = len(got)
    rows: list[str] = []
    all_equal = True
    consecutive = 0

    for i, (e, g) in enumerate(zip_longest(expected, got)):
        if i < len_expected and i < len_got and e == g:
            rows.append(f"{_EQUAL_MARKER} eg[{i}] `{e}`")
            consecutive = 0
            continue

        all_equal = False
        if i >= len_expected:
            marker_e, marker_g = _EXTRA_GOT_MARKERS
        elif i >= len_got:
            marker_e, marker_g = _EXTRA_EXPECTED_MARKERS
        else:
            marker_e, marker_g = _CHANGED_MARKERS

        rows.append(f"{marker_e}  e[{i}] `{'' if e is None else e}`")
        rows.append(f"{marker_g}  g[{i}] `{'' if g is None else g}`")
        consecutive += 1
        if consecutive >= max_mismatches:
            rows.append(f"... stopping after {max_mismatches} unequal lines")
            logger.debug(f"Diff truncated at index {i}")
            break

    return "\n".join(rows), all_equal


def pretty_text_diff(expected: str, got: str, color: bool = True) -> str:
    """Render a character-level diff of two strings.

    Insertions (present in *got* only) are green and deletions red when
    *color* is set; otherwise they are wrapped as ``{+...+}`` and ``[-...-]``.
    """
    dmp = diff_match_patch()
    diffs = dmp.diff_main(expected, got, False)
    dmp.diff_cleanupSemantic(diffs)

    parts: list[str] = []
    for op, text in diffs:
        if op == diff_match_patch.DIFF_INSERT:
            parts.append(f"{_ANSI_INSERT}{text}{_ANSI_RESET}" if color else f"{{+{text}+}}")
        elif op == diff_match_patch.DIFF_DELETE:
            parts.append(f"{_ANSI_DELETE}{text}{_ANSI_RESET}" if color else f"[-{text}-]")
        else:
            parts.append(text)
    return "".join(parts)
