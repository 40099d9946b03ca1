from gpt_markdown.render.markdown import (
    render_conversation,
    render_markdown,
    render_part,
)

__all__ = [
    "render_conversation",
    "render_markdown",
    "render_part",
]
