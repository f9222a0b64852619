from dataclasses import dataclass, field

from rtctf.models.enums import Domain, Intent, ResultSource


@dataclass(frozen=True)
class ClassificationSignals:
    intent: Intent = Intent.DEFAULT
    domains: frozenset[Domain] = field(default_factory=frozenset)

    @property
    def primary_domain(self) -> Domain | None:
        for domain in Domain:
            if domain in self.domains:
                return domain
        return None

    def ordered_domains(self) -> list[Domain]:
        return [d for d in Domain if d in self.domains]


@dataclass(frozen=True)
class TransformResult:
    prompt: str
    source: ResultSource
    fallback: str | None = None


@dataclass(frozen=True)
class LlmCallResult:
    content: str
    prompt_tokens: int
    completion_tokens: int


@dataclass
class RateLimitRecord:
    count: int
    reset_time: float


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    retry_after_seconds: int = 0
