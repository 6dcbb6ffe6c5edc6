import json
from pathlib import Path

from wordtally.core import run_count
from wordtally.io import read_text, render_table, to_json, write_json
from wordtally.models import CountRequest, WordCount


def test_to_json_and_write_json(tmp_path: Path) -> None:
    response = run_count(CountRequest(text="hello world hello"))

    payload = json.loads(to_json(response))
    assert payload["words"][0] == {"word": "hello", "count": 2}
    assert payload["metadata"]["normalizer_id"] == "ascii-alnum-casefold-v1"

    output_path = tmp_path / "out" / "counts.json"
    write_json(response, output_path)
    written = json.loads(output_path.read_text(encoding="utf-8"))
    assert written["words"] == payload["words"]


def test_render_table_keeps_order() -> None:
    table = render_table(
        [WordCount(word="emergency", count=12), WordCount(word="a", count=3)]
    )

    assert table.splitlines() == [
        "word       count",
        "---------  -----",
        "emergency     12",
        "a              3",
    ]


def test_render_table_empty() -> None:
    assert render_table([]).splitlines() == ["word  count", "----  -----"]


def test_read_text_file_and_literal(tmp_path: Path) -> None:
    source = tmp_path / "doc.txt"
    source.write_text("from a file", encoding="utf-8")

    assert read_text(str(source)) == "from a file"
    assert read_text("just some words") == "just some words"
