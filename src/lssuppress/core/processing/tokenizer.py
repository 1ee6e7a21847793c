from __future__ import annotations

"""
Token Estimation Engine.

Measures how much model context a listing costs before and after it is
condensed. Counts with tiktoken's BPE encodings; when an encoding cannot be
loaded (tiktoken fetches its BPE ranks on first use, which fails offline)
the service degrades to a character-density heuristic instead of failing.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import tiktoken

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

CHARS_PER_TOKEN_AVG = 4
DEFAULT_ENCODING = "o200k_base"
LEGACY_ENCODING = "cl100k_base"


# -----------------------------------------------------------------------------
# STRATEGY INTERFACES
# -----------------------------------------------------------------------------

class TokenizerStrategy(ABC):
    """
    Abstract base class for token counting algorithms.
    """

    @abstractmethod
    def count(self, text: str) -> int:
        """
        Calculate the token count for a given text segment.

        Args:
            text: Input string to be tokenized.

        Returns:
            int: Total token count.
        """
        pass


class HeuristicStrategy(TokenizerStrategy):
    """
    Fallback algorithm using character density estimation.
    """

    def count(self, text: str) -> int:
        """Estimate tokens using the global characters-to-token ratio."""
        if not text:
            return 0
        return math.ceil(len(text) / CHARS_PER_TOKEN_AVG)


class TiktokenStrategy(TokenizerStrategy):
    """
    Local BPE encoder backed by tiktoken.
    """

    def __init__(self, encoding_name: str = DEFAULT_ENCODING) -> None:
        self.encoding_name = encoding_name
        self._encoding: Optional[Any] = None

    def _get_encoding(self) -> Any:
        if self._encoding is None:
            try:
                self._encoding = tiktoken.get_encoding(self.encoding_name)
            except ValueError:
                logger.debug(f"Encoding '{self.encoding_name}' not found, falling back to {LEGACY_ENCODING}.")
                self._encoding = tiktoken.get_encoding(LEGACY_ENCODING)
        return self._encoding

    def count(self, text: str) -> int:
        """Execute local BPE encoding via tiktoken."""
        return len(self._get_encoding().encode(text, disallowed_special=()))


# -----------------------------------------------------------------------------
# SERVICE ORCHESTRATION (FACADE)
# -----------------------------------------------------------------------------

class TokenizerService:
    """
    Token counting with a guaranteed result.

    Routes through tiktoken and falls back to the heuristic on any failure,
    so reporting never breaks the condensing pipeline.
    """

    def __init__(self, encoding_name: str = DEFAULT_ENCODING, use_tiktoken: bool = True) -> None:
        self.heuristic = HeuristicStrategy()
        # None: heuristic only, no encoding download
        self._tiktoken: Optional[TokenizerStrategy] = (
            TiktokenStrategy(encoding_name) if use_tiktoken else None
        )

    def count(self, text: str) -> int:
        """
        Count tokens for a text segment.

        Args:
            text: Raw input text. Empty or None yields 0.

        Returns:
            int: Token count (exact, or estimated on fallback).
        """
        if not text:
            return 0

        if self._tiktoken is None:
            return self.heuristic.count(text)

        try:
            return self._tiktoken.count(text)
        except Exception as e:
            logger.warning(f"Tiktoken counting failed: {e}. Using heuristic fallback.")
            return self.heuristic.count(text)

    def savings(self, before: str, after: Optional[str]) -> Dict[str, int]:
        """
        Report token usage of a listing and of its replacement.

        Args:
            before: Original listing text.
            after: Replacement text, or None when the original is kept.

        Returns:
            Dict[str, int]: tokens_before, tokens_after and tokens_saved.
        """
        tokens_before = self.count(before)
        tokens_after = tokens_before if after is None else self.count(after)
        return {
            "tokens_before": tokens_before,
            "tokens_after": tokens_after,
            "tokens_saved": tokens_before - tokens_after,
        }


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

# Singleton instance; encodings are loaded lazily on first count
_SERVICE_INSTANCE = TokenizerService()


def configure_tokenizer(use_tiktoken: bool = True, encoding_name: str = DEFAULT_ENCODING) -> None:
    """
    Replace the shared service.

    Args:
        use_tiktoken: False restricts counting to the character heuristic,
                      so no BPE encoding is ever loaded (offline use).
        encoding_name: tiktoken encoding for exact counts.
    """
    global _SERVICE_INSTANCE
    _SERVICE_INSTANCE = TokenizerService(encoding_name, use_tiktoken=use_tiktoken)


def count_tokens(text: str) -> int:
    """
    Count the tokens of a text through the shared service.

    Args:
        text: Input string content.

    Returns:
        int: Total token count.
    """
    return _SERVICE_INSTANCE.count(text)


def estimate_savings(before: str, after: Optional[str]) -> Dict[str, int]:
    """Token usage before and after condensing, via the shared service."""
    return _SERVICE_INSTANCE.savings(before, after)
