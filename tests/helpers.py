from __future__ import annotations


class CompletionCounter:
    """Zero-argument on_complete hook that counts how often it fired."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
