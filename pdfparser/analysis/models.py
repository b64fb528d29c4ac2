from dataclasses import dataclass, field


@dataclass(frozen=True)
class CoverageAmount:
    type: str
    amount: str


@dataclass(frozen=True)
class InsuranceDetails:
    """Fields pulled from insurance documents; None where not found."""

    policy_number: str | None = None
    claim_number: str | None = None
    insured_party: str | None = None
    effective_date: str | None = None
    expiration_date: str | None = None
    premium: str | None = None
    coverages: list[CoverageAmount] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisResult:
    """Summary, topics, key points and language of a document."""

    summary: str
    main_topics: list[str] = field(default_factory=list)
    key_points: list[str] = field(default_factory=list)
    language: str = "unknown"
    document_type: str = "general"
    structured_data: InsuranceDetails | None = None
