from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from gpt_markdown.core.exceptions import (
    ConversionFailedException,
    MalformedExportError,
)
from gpt_markdown.core.types import ConversionResult
from gpt_markdown.facade.naming import NameAllocator
from gpt_markdown.providers.chatgpt.loader import (
    iter_records,
    open_export,
    parse_conversation,
)
from gpt_markdown.render.markdown import render_conversation
from gpt_markdown.storage.base import StorageBackend
from gpt_markdown.storage.disk import DiskStorage

logger = logging.getLogger(__name__)


class ExportConverter:
    """Main entry point for the gpt_markdown library.

    Usage::

        converter = ExportConverter.to_directory("./output")
        result = converter.convert("/path/to/chatgpt-export.zip", limit=10)
        for path in result.written:
            print(path)
    """

    def __init__(self, storage: StorageBackend) -> None:
        self._storage = storage

    @classmethod
    def to_directory(cls, output_dir: str | Path) -> ExportConverter:
        """Construct a converter that writes ``.md`` files under *output_dir*."""
        return cls(storage=DiskStorage(str(output_dir)))

    def convert(self, source: str | Path, *, limit: int = 0) -> ConversionResult:
        """Render every conversation in *source* to its own Markdown document.

        Args:
            source: ``conversations.json``, a directory holding it, or the
                export ``.zip``.
            limit: Convert at most this many conversations, in export order.
                ``0`` or a negative value converts all of them.

        Returns:
            A ConversionResult summarising the work done. A failure in one
            conversation is recorded there and does not stop the others.

        Raises:
            ExportNotFoundError: *source* does not hold an export.
            ConversionFailedException: the export is not valid JSON.
        """
        result = ConversionResult(source=str(source))
        names = NameAllocator()

        try:
            with open_export(source) as stream:
                for index, raw in enumerate(iter_records(stream, limit=limit)):
                    result.conversations_found += 1
                    self._convert_one(index, raw, names, result)
        except MalformedExportError as exc:
            logger.error("Could not read %s: %s", source, exc)
            raise ConversionFailedException(str(exc)) from exc

        if result.conversations_found == 0:
            logger.warning("No conversations found in %s", source)
        return result

    def _convert_one(
        self,
        index: int,
        raw: Any,
        names: NameAllocator,
        result: ConversionResult,
    ) -> None:
        try:
            conversation = parse_conversation(raw, index=index)
        except MalformedExportError as exc:
            logger.error("Skipping conversation #%d: %s", index, exc)
            result.conversations_failed += 1
            result.errors.append(exc.message)
            return

        key = names.allocate(conversation.title)
        try:
            markdown = render_conversation(conversation)
            self._storage.write(key, markdown.encode("utf-8"))
        except Exception as exc:
            logger.error(
                "Conversion failed for %r: %s", conversation.title or key, exc
            )
            result.conversations_failed += 1
            result.errors.append(f"{key}: {exc}")
            return

        uri = self._storage.resolve_uri(key)
        logger.info("Wrote %s", uri)
        result.documents_written += 1
        result.written.append(uri)
