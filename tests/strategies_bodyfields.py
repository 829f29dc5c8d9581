# topmark:header:start
#
#   project      : BodyFields
#   file         : strategies_bodyfields.py
#   file_relpath : tests/strategies_bodyfields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for field sets and documents holding field blocks.

Keys and values are drawn so that they survive the line-oriented encoding:
no line breaks, keys never contain the ``": "`` separator, values never start
or end with whitespace (raw input is stripped as a whole).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_#()"

s_key: st.SearchStrategy[str] = st.text(alphabet=_ALPHABET, min_size=1, max_size=12)

s_value: st.SearchStrategy[str] = st.builds(
    lambda head, tail: f"{head}{tail}".strip() or head,
    st.text(alphabet=_ALPHABET, min_size=1, max_size=4),
    st.text(alphabet=_ALPHABET + " :", max_size=16),
).filter(lambda v: v == v.strip() and not v.endswith(":"))

s_fields: st.SearchStrategy[dict[str, str]] = st.dictionaries(
    s_key, s_value, min_size=1, max_size=8
)

s_prose: st.SearchStrategy[str] = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz .,!\n", max_size=60
).filter(lambda t: ": " not in t and "<!--" not in t)


@st.composite
def s_fields_and_update(draw: Draw) -> tuple[dict[str, str], dict[str, str]]:
    """Draw existing fields and an update touching a subset of their keys plus new keys."""
    existing: dict[str, str] = draw(s_fields)
    touched: list[str] = draw(st.lists(st.sampled_from(sorted(existing)), unique=True))
    update: dict[str, str] = {k: draw(s_value) for k in touched}
    extra: dict[str, str] = draw(st.dictionaries(s_key, s_value, max_size=3))
    for k, v in extra.items():
        update.setdefault(k, v)
    return existing, update
