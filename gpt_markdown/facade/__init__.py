from gpt_markdown.core.types import ConversionResult
from gpt_markdown.facade.core import ExportConverter
from gpt_markdown.facade.naming import NameAllocator, safe_filename

__all__ = [
    "ConversionResult",
    "ExportConverter",
    "NameAllocator",
    "safe_filename",
]
