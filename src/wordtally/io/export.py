"""Word count output serializers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from wordtally.models import CountResponse, WordCount


def to_json(response: CountResponse) -> str:
    """Serialize a count response to formatted JSON."""
    return response.model_dump_json(indent=2)


def write_json(response: CountResponse, output_path: str | Path) -> None:
    """Write count response JSON to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(response) + "\n", encoding="utf-8")


def render_table(words: Sequence[WordCount]) -> str:
    """Render words as a two-column table, keeping their order."""
    header = ("word", "count")
    rows = [(entry.word, str(entry.count)) for entry in words]
    word_width = max([len(header[0]), *(len(word) for word, _ in rows)])
    count_width = max([len(header[1]), *(len(count) for _, count in rows)])

    lines = [
        f"{header[0]:<{word_width}}  {header[1]:>{count_width}}",
        f"{'-' * word_width}  {'-' * count_width}",
    ]
    for word, count in rows:
        lines.append(f"{word:<{word_width}}  {count:>{count_width}}")
    return "\n".join(lines)
