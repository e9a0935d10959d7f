from enum import Enum


class FillWithRealPolicy(Enum):
    """
    Tells an interpolator whether a real neighbouring value may stand in for a
    missing point before it falls back to the configured
    [`FillPolicy`][tsdbquery.enum.FillPolicy].
    """

    NONE = "none"  # Never use real values, always apply the fill policy.
    PREFER_PREVIOUS = "prefer_previous"  # Previous value if present, else next.
    PREFER_NEXT = "prefer_next"  # Next value if present, else previous.
    PREVIOUS_ONLY = "previous_only"  # Previous value only.
    NEXT_ONLY = "next_only"  # Next value only.

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None
