"""
Splitting of long transcripts into chunks the summarization model accepts.
"""

import re
from typing import List

# A sentence is a run of non-terminators followed by terminators. The second
# alternative keeps a trailing fragment that has no terminal punctuation.
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+|[^.!?]+$")


def split_sentences(text: str) -> List[str]:
    """Split text into stripped, non-empty sentences."""
    sentences = (match.strip() for match in SENTENCE_PATTERN.findall(text))
    return [sentence for sentence in sentences if sentence]


def _pack_words(words: List[str], max_length: int) -> List[str]:
    packed = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if current and len(candidate) > max_length:
            packed.append(current)
            current = word
        else:
            current = candidate
    if current:
        packed.append(current)
    return packed


def split_text_into_chunks(text: str, max_length: int) -> List[str]:
    """
    Split text into chunks of at most ``max_length`` characters.

    Sentences are packed greedily, joined by single spaces. A sentence that is
    longer than ``max_length`` on its own is split on whitespace and its words
    are packed the same way; the last partial word chunk stays open so the next
    sentence can join it. A single word longer than ``max_length`` becomes its
    own oversized chunk.

    Args:
        text: Text to split
        max_length: Maximum chunk length in characters

    Returns:
        Chunks in text order
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")

    chunks = []
    current = ""

    for sentence in split_sentences(text):
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) <= max_length:
            current = candidate
            continue

        if current:
            chunks.append(current)
            current = ""

        if len(sentence) <= max_length:
            current = sentence
        else:
            word_chunks = _pack_words(sentence.split(), max_length)
            chunks.extend(word_chunks[:-1])
            current = word_chunks[-1]

    if current:
        chunks.append(current)

    return chunks
