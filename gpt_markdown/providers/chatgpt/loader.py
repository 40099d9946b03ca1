"""Locating and streaming ``conversations.json`` out of an export."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import Any, BinaryIO

import ijson
from pydantic import ValidationError

from gpt_markdown.core.exceptions import ExportNotFoundError, MalformedExportError
from gpt_markdown.providers.chatgpt.schemas import ChatGPTConversation

logger = logging.getLogger(__name__)

CONVERSATIONS_FILENAME = "conversations.json"


def _zip_member(zf: zipfile.ZipFile) -> str | None:
    """Shallowest ``conversations.json`` inside the archive, if any."""
    candidates = [
        info.filename
        for info in zf.infolist()
        if not info.is_dir()
        and PurePosixPath(info.filename).name == CONVERSATIONS_FILENAME
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda name: (len(PurePosixPath(name).parts), name))


@contextmanager
def open_export(path: str | Path) -> Iterator[BinaryIO]:
    """Open the ``conversations.json`` stream for an export.

    *path* may be the JSON file itself, a directory containing it, or the
    ``.zip`` archive ChatGPT hands out.
    """
    source = Path(path)
    if not source.exists():
        raise ExportNotFoundError(str(source))

    if source.is_dir():
        source = source / CONVERSATIONS_FILENAME
        if not source.is_file():
            raise ExportNotFoundError(
                str(source), f"No {CONVERSATIONS_FILENAME} in directory {path}"
            )

    if zipfile.is_zipfile(source):
        with zipfile.ZipFile(source, "r") as zf:
            member = _zip_member(zf)
            if member is None:
                raise ExportNotFoundError(
                    str(source), f"No {CONVERSATIONS_FILENAME} in archive {source}"
                )
            logger.info("Reading %s from %s", member, source)
            with zf.open(member) as stream:
                yield stream  # type: ignore[misc]
        return

    logger.info("Reading %s", source)
    with open(source, "rb") as stream:
        yield stream


def iter_records(stream: BinaryIO, limit: int = 0) -> Iterator[Any]:
    """Stream the raw items of the top-level conversation array.

    ``limit <= 0`` yields every item; otherwise at most *limit*, in input
    order. Invalid JSON raises :class:`MalformedExportError`.
    """
    items = ijson.items(stream, "item", use_float=True)
    index = 0
    try:
        for raw in items:
            yield raw
            index += 1
            if limit > 0 and index >= limit:
                return
    except ijson.JSONError as exc:
        raise MalformedExportError(f"invalid JSON: {exc}", index=index) from exc


def parse_conversation(raw: Any, index: int | None = None) -> ChatGPTConversation:
    """Validate one raw item. Raises :class:`MalformedExportError`."""
    try:
        return ChatGPTConversation.model_validate(raw)
    except ValidationError as exc:
        raise MalformedExportError(str(exc), index=index) from exc


def iter_conversations(
    stream: BinaryIO, limit: int = 0
) -> Iterator[ChatGPTConversation]:
    """Stream and validate conversations, skipping records that fail validation."""
    for index, raw in enumerate(iter_records(stream, limit=limit)):
        try:
            conversation = parse_conversation(raw, index=index)
        except MalformedExportError as exc:
            logger.warning("Skipping conversation: %s", exc)
            continue
        yield conversation
