from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CHATGPT_CONVERSATIONS_PATH = FIXTURES_DIR / "conversations.json"

CHATGPT_CONVERSATIONS: list[dict] = json.loads(
    CHATGPT_CONVERSATIONS_PATH.read_text(encoding="utf-8")
)


def build_zip(files: dict[str, bytes | str]) -> bytes:
    """Create an in-memory zip archive from a dict of {path: content}."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in files.items():
            if isinstance(data, str):
                data = data.encode("utf-8")
            zf.writestr(name, data)
    return buf.getvalue()


@pytest.fixture()
def export_json(tmp_path: Path) -> Path:
    """Copy of the fixture ``conversations.json`` in a temp directory."""
    path = tmp_path / "export" / "conversations.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(CHATGPT_CONVERSATIONS), encoding="utf-8")
    return path


@pytest.fixture()
def export_zip(tmp_path: Path) -> Path:
    """The fixture export packaged the way ChatGPT ships it."""
    dest = tmp_path / "chatgpt-export.zip"
    dest.write_bytes(
        build_zip(
            {
                "chat.html": "<html></html>",
                "conversations.json": json.dumps(CHATGPT_CONVERSATIONS),
                "user.json": "{}",
            }
        )
    )
    return dest
