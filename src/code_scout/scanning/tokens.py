"""Rough token estimates for pasting source into LLM prompts.

The ratios are rules of thumb (about four characters or 0.75 words per
token), not tokenizer output.
"""

from typing import Iterable, List, Tuple

from ..models import TokenEstimate
from .base import split_lines


def estimate_tokens(text: str) -> TokenEstimate:
    """Estimate token counts for a block of text. Never returns fewer than 1 token."""
    char_count = len(text.encode("utf-8"))
    word_count = len(text.split())
    line_count = len(split_lines(text))

    char_tokens = int(char_count / 4.0)
    word_tokens = int(word_count * 1.3)
    gpt4_estimate = max(1, (char_tokens + word_tokens) // 2)

    return TokenEstimate(
        total_tokens=gpt4_estimate,
        char_count=char_count,
        word_count=word_count,
        line_count=line_count,
        gpt4_estimate=gpt4_estimate,
        claude_estimate=int(gpt4_estimate * 1.05),
        gemini_estimate=int(gpt4_estimate * 0.9),
    )


def estimate_tokens_batch(files: Iterable[Tuple[str, str]]) -> List[Tuple[str, TokenEstimate]]:
    """Estimate tokens for (path, content) pairs."""
    return [(path, estimate_tokens(content)) for path, content in files]
