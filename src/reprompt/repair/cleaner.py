"""
Clean text captured from terminal UIs.

Each candidate reading of the input (see codec.variants) is stripped of
escape sequences, run through the line pipeline and scored. The best
scoring result wins; on a tie the earlier candidate is kept, so the
unmodified reading is preferred over any recovery.
"""

import logging
from dataclasses import dataclass

from reprompt.codec.ansi import strip_ansi
from reprompt.codec.variants import generate_variants
from reprompt.repair.pipeline import assemble
from reprompt.repair.scoring import score_text

logger = logging.getLogger(__name__)


@dataclass
class CleanResult:
    """Result of cleaning operation."""
    original_size: int
    cleaned_size: int
    variant_index: int
    score: int
    candidates: int

    @property
    def was_recovered(self) -> bool:
        """True if an encoding-recovered reading won over the raw text."""
        return self.variant_index > 0

    @property
    def size_reduction(self) -> float:
        """Fraction of the original length removed by cleaning."""
        if self.original_size == 0:
            return 0.0
        return 1 - self.cleaned_size / self.original_size


def clean(text: str) -> tuple[str, CleanResult]:
    """
    Clean TUI artifacts from text.

    Args:
        text: Raw captured text

    Returns:
        Tuple of (cleaned_text, CleanResult)
    """
    variants = generate_variants(text)

    best_text = ''
    best_score = 0
    best_index = -1
    for index, variant in enumerate(variants):
        cleaned = assemble(strip_ansi(variant))
        score = score_text(cleaned)
        logger.debug("candidate %d scored %d (%d chars)", index, score, len(cleaned))
        if best_index < 0 or score > best_score:
            best_text, best_score, best_index = cleaned, score, index

    if best_index > 0:
        logger.debug("using recovered candidate %d", best_index)

    best_text = best_text.rstrip()
    return best_text, CleanResult(
        original_size=len(text),
        cleaned_size=len(best_text),
        variant_index=best_index,
        score=best_score,
        candidates=len(variants),
    )


def clean_text(text: str) -> str:
    """Clean TUI artifacts from text and return only the cleaned text."""
    cleaned, _ = clean(text)
    return cleaned
