"""Best-effort split of an LLM guide into "Step N:" sections."""

import re
from dataclasses import dataclass, field
from typing import List, Literal

STEP_MARKER = re.compile(r"Step\s+\d+:", re.IGNORECASE)


@dataclass(frozen=True)
class StepExtraction:
    """``kind == "no_steps"`` means no marker was found; ``steps`` then holds the whole text."""

    kind: Literal["steps", "no_steps"]
    steps: List[str] = field(default_factory=list)
    intro: str = ""

    @property
    def has_steps(self) -> bool:
        return self.kind == "steps"


def extract_steps(summary: str) -> StepExtraction:
    text = (summary or "").strip()
    if not STEP_MARKER.search(text):
        return StepExtraction(kind="no_steps", steps=[text] if text else [])

    intro, *parts = STEP_MARKER.split(text)
    steps = [part.strip() for part in parts if part.strip()]
    if not steps:
        return StepExtraction(kind="no_steps", steps=[text])
    return StepExtraction(kind="steps", steps=steps, intro=intro.strip())
