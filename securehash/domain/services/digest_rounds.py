"""Iterated digest application."""

from collections.abc import Callable

DigestRound = Callable[[bytes], bytes]


def apply_rounds(data: bytes, round_fn: DigestRound, rounds: int) -> bytes:
    """
    Apply ``round_fn`` to its own previous output ``rounds`` times.

    The first round runs on ``data`` (the salted payload), so ``rounds=1`` is
    exactly ``round_fn(data)`` and ``rounds=2`` is ``round_fn(round_fn(data))``.
    Whatever properties the round function has (output size, avalanche) are
    inherited unchanged.

    Args:
        data: Salted payload to digest
        round_fn: Single-round digest function
        rounds: Number of applications, at least 1

    Returns:
        The output of the last round

    Raises:
        ValueError: If rounds is less than 1
    """
    if rounds < 1:
        raise ValueError(f"rounds must be at least 1, got {rounds}")

    digest = bytes(data)
    for _ in range(rounds):
        digest = bytes(round_fn(digest))
    return digest
