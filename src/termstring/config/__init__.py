# topmark:header:start
#
#   project      : TermString
#   file         : __init__.py
#   file_relpath : src/termstring/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for TermString: logging setup and environment lookups."""

from __future__ import annotations
