"""Settled-join helper for running independent calls concurrently.

``gather_settled`` submits every call to a thread pool and waits for all
of them. A failing call never cancels or short-circuits its siblings;
each outcome comes back as a ``Settled`` holding either the value or the
exception.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional


@dataclass(frozen=True, slots=True)
class Settled:
    """Outcome of one call: a value, or the exception it raised."""

    name: str
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def gather_settled(
    calls: Mapping[str, Callable[[], Any]], max_workers: int
) -> Dict[str, Settled]:
    """Run named zero-argument calls concurrently and wait for all of them.

    Args:
        calls: Branch name to zero-argument callable.
        max_workers: Upper bound on pool threads.

    Returns:
        Branch name to Settled outcome, one entry per call.
    """
    if not calls:
        return {}

    outcomes: Dict[str, Settled] = {}
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(calls)))) as pool:
        futures = {pool.submit(fn): name for name, fn in calls.items()}
        for future in as_completed(futures):
            name = futures[future]
            error = future.exception()
            if error is not None:
                outcomes[name] = Settled(name=name, error=error)
            else:
                outcomes[name] = Settled(name=name, value=future.result())

    return outcomes
