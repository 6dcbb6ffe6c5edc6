"""I/O utilities."""

from wordtally.io.export import render_table, to_json, write_json
from wordtally.io.text import read_text

__all__ = ["read_text", "render_table", "to_json", "write_json"]
