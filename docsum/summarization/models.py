from dataclasses import dataclass
from enum import Enum
from collections.abc import Mapping

FALLBACK_SUMMARY = "Summary temporarily unavailable. Please try again later."


class SummaryLength(str, Enum):
    """Fixed set of summary granularities, each with its own prompt template."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SummaryFailure(str, Enum):
    """Why a summary call fell back instead of returning generated text."""

    UNAVAILABLE = "unavailable"
    QUOTA_EXCEEDED = "quota_exceeded"


@dataclass(frozen=True)
class SummaryOutcome:
    """Result of one summary call: generated text, or the fallback plus a reason."""

    length: SummaryLength
    text: str
    failure: SummaryFailure | None = None

    @classmethod
    def generated(cls, length: SummaryLength, text: str) -> "SummaryOutcome":
        return cls(length=length, text=text)

    @classmethod
    def fallback(cls, length: SummaryLength, failure: SummaryFailure) -> "SummaryOutcome":
        return cls(length=length, text=FALLBACK_SUMMARY, failure=failure)

    @property
    def is_fallback(self) -> bool:
        return self.failure is not None


@dataclass(frozen=True)
class SummarySet:
    """Exactly one outcome per SummaryLength."""

    outcomes: Mapping[SummaryLength, SummaryOutcome]

    def __post_init__(self) -> None:
        missing = [length.value for length in SummaryLength if length not in self.outcomes]
        if missing:
            raise ValueError(f"SummarySet is missing lengths: {missing}")
        if len(self.outcomes) != len(SummaryLength):
            raise ValueError("SummarySet must hold exactly one outcome per length")
        for length, outcome in self.outcomes.items():
            if outcome.length is not length:
                raise ValueError(
                    f"Outcome for {length.value} is labelled {outcome.length.value}"
                )
        object.__setattr__(self, "outcomes", dict(self.outcomes))

    def text(self, length: SummaryLength) -> str:
        return self.outcomes[length].text

    def as_dict(self) -> dict[str, str]:
        """Render as {"short": ..., "medium": ..., "long": ...}."""
        return {length.value: self.outcomes[length].text for length in SummaryLength}

    @property
    def fallback_lengths(self) -> list[SummaryLength]:
        return [length for length in SummaryLength if self.outcomes[length].is_fallback]

    @property
    def quota_exceeded(self) -> bool:
        return any(
            outcome.failure is SummaryFailure.QUOTA_EXCEEDED
            for outcome in self.outcomes.values()
        )
