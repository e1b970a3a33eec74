# src/lsa/utils/tokenizer.py
import sys
from functools import lru_cache

import tiktoken


@lru_cache(maxsize=1)
def get_encoding():
    try:
        return tiktoken.get_encoding("cl100k_base")
    except Exception:
        return tiktoken.get_encoding("p50k_base")


def count_tokens(text: str) -> int:
    """Estimates how many LLM tokens a snapshot will cost."""
    try:
        return len(get_encoding().encode(text, disallowed_special=()))
    except Exception as e:
        print(f"  > [Warning] Token estimate falling back to chars/4 ({e})", file=sys.stderr)
        return len(text) // 4
