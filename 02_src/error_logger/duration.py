"""Human-readable rendering of elapsed milliseconds."""

# (key, plural label, singular label, modulus), smallest unit first.
# Days keep the whole remaining carry.
UNITS = [
    ("ms", "ms", "ms", 1000),
    ("seconds", "seconds", "second", 60),
    ("minutes", "minutes", "minute", 60),
    ("hours", "hours", "hour", 24),
    ("days", "days", "day", None),
]

ZERO_DURATION = "0 ms"


def decompose_duration(ms: int) -> dict[str, int]:
    """
    Split milliseconds into ms/seconds/minutes/hours/days.

    Each unit keeps the remainder of its modulus and carries the quotient
    to the next one.

    Args:
        ms: Non-negative duration in milliseconds.

    Returns:
        Mapping of unit key to value.
    """
    if ms < 0:
        raise ValueError(f"Duration must be non-negative, got {ms}")

    remaining = int(ms)
    duration: dict[str, int] = {}
    for key, _plural, _singular, mod in UNITS:
        if mod is None:
            duration[key] = remaining
            break
        remaining, duration[key] = divmod(remaining, mod)
    return duration


def format_duration(ms: int) -> str:
    """Render a duration largest unit first, e.g. "1 minute, 1 second"."""
    duration = decompose_duration(ms)
    parts = [
        f"{duration[key]} {singular if duration[key] == 1 else plural}"
        for key, plural, singular, _mod in reversed(UNITS)
        if duration[key]
    ]
    if not parts:
        return ZERO_DURATION
    return ", ".join(parts)
