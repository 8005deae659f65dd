"""Text utility functions."""
import re
from typing import List

_TOKEN_PATTERN = re.compile(r"\w+", re.UNICODE)


def tokenize(text: str, lowercase: bool = True) -> List[str]:
    """
    Split text into word tokens.
    
    Args:
        text: Input text
        lowercase: Fold tokens to lower case
        
    Returns:
        Tokens in order of appearance
    """
    if not text:
        return []
    if lowercase:
        text = text.lower()
    return _TOKEN_PATTERN.findall(text)
