# topmark:header:start
#
#   project      : BodyFields
#   file         : __init__.py
#   file_relpath : src/bodyfields/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BodyFields package.

BodyFields maintains machine-readable ``key: value`` blocks inside the body
of GitHub issues. A block is delimited by HTML comment markers so it stays
invisible in rendered Markdown; BodyFields creates, merges, replaces and
removes such blocks idempotently and exposes both a CLI and a small typed API
(`bodyfields.api`).
"""

from __future__ import annotations
