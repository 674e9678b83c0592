from hunkreview.core.review.client import ReviewClient, decode_suggestions
from hunkreview.core.review.mapper import CommentMapper, coerce_line_number
from hunkreview.core.review.prompt import PromptBuilder

__all__ = [
    "PromptBuilder",
    "ReviewClient",
    "CommentMapper",
    "decode_suggestions",
    "coerce_line_number",
]
