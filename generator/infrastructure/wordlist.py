"""Wordlist loading."""

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


def load_wordlist(path: Union[str, Path]) -> List[str]:
    """
    Load candidate labels from a UTF-8 wordlist, one label per line.

    Leading/trailing whitespace is stripped and blank lines are skipped.
    Order and duplicates are preserved.

    Returns:
        List of non-empty candidate labels.

    Raises:
        OSError: If the file is missing, unreadable or not valid UTF-8.
    """
    candidates = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                label = line.strip()
                if label:
                    candidates.append(label)
    except UnicodeDecodeError as e:
        raise OSError(f"{path} is not valid UTF-8: {e}") from e

    logger.debug(f"Loaded {len(candidates)} candidates from {path}")
    return candidates
