import re
from collections import Counter

from pdfparser.analysis import vocabulary as vocab
from pdfparser.analysis.models import AnalysisResult, CoverageAmount, InsuranceDetails
from pdfparser.classification.models import ClassificationResult

SUMMARY_MAX_LENGTH = 200
SUMMARY_LINE_MIN_LENGTH = 30
SUMMARY_LINES = 3
KEY_POINT_MAX_LENGTH = 100
MAX_KEY_POINTS = 5
MAX_TOPICS = 5
MIN_VOCABULARY_TOPICS = 3
TOPIC_WORD_MIN_LENGTH = 5
EMPTY_SUMMARY = "El documento no contiene texto para resumir."


class LocalContentAnalyzer:
    """Heuristic stand-in for the remote analysis call. Pure and total."""

    def analyze(self, text: str, classification: ClassificationResult) -> AnalysisResult:
        _ = classification
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        document_type = self.detect_document_type(text)
        return AnalysisResult(
            summary=self._summarize(lines, document_type),
            main_topics=self._topics(text, document_type),
            key_points=self._key_points(lines),
            language=self.detect_language(text),
            document_type=document_type,
            structured_data=(
                self.extract_insurance_details(text) if document_type == "insurance" else None
            ),
        )

    @staticmethod
    def detect_document_type(text: str) -> str:
        for document_type, pattern in vocab.DOCUMENT_TYPE_PATTERNS:
            if pattern.search(text):
                return document_type
        return "general"

    @staticmethod
    def extract_insurance_details(text: str) -> InsuranceDetails:
        def first(pattern: re.Pattern[str], group: int | str = 1) -> str | None:
            match = pattern.search(text)
            return match.group(group).strip() if match else None

        coverages = [
            CoverageAmount(type=m.group("type").strip(" -\t"), amount=m.group("amount").strip())
            for m in vocab.COVERAGE_LINE.finditer(text)
        ]
        return InsuranceDetails(
            policy_number=first(vocab.POLICY_NUMBER),
            claim_number=first(vocab.CLAIM_NUMBER),
            insured_party=first(vocab.INSURED_PARTY, "value"),
            effective_date=first(vocab.EFFECTIVE_DATE, "value"),
            expiration_date=first(vocab.EXPIRATION_DATE, "value"),
            premium=first(vocab.PREMIUM, "value"),
            coverages=coverages,
        )

    @staticmethod
    def detect_language(text: str) -> str:
        """Return 'es', 'en' or 'unknown' by comparing function-word counts."""
        words = vocab.WORD.findall(text.lower())
        spanish = sum(1 for w in words if w in vocab.SPANISH_FUNCTION_WORDS)
        english = sum(1 for w in words if w in vocab.ENGLISH_FUNCTION_WORDS)
        if spanish > english * vocab.LANGUAGE_MARGIN:
            return "es"
        if english > spanish * vocab.LANGUAGE_MARGIN:
            return "en"
        return "unknown"

    @staticmethod
    def _summarize(lines: list[str], document_type: str) -> str:
        canned = vocab.CANNED_SUMMARIES.get(document_type)
        if canned:
            return canned
        picked = [
            line
            for line in lines
            if len(line) > SUMMARY_LINE_MIN_LENGTH and not vocab.BULLET_START.match(line)
        ][:SUMMARY_LINES]
        if not picked:
            return EMPTY_SUMMARY
        summary = " ".join(picked)
        if len(summary) > SUMMARY_MAX_LENGTH:
            summary = summary[:SUMMARY_MAX_LENGTH].rstrip() + "..."
        return summary

    @staticmethod
    def _key_points(lines: list[str]) -> list[str]:
        points: list[str] = []
        for line in lines:
            if len(line) >= KEY_POINT_MAX_LENGTH:
                continue
            if any(pattern.search(line) for pattern in vocab.KEY_POINT_PATTERNS):
                points.append(line)
                if len(points) == MAX_KEY_POINTS:
                    break
        return points

    @staticmethod
    def _topics(text: str, document_type: str) -> list[str]:
        lowered = text.lower()
        topics = [
            term for term in vocab.TOPIC_VOCABULARY.get(document_type, ()) if term in lowered
        ][:MAX_TOPICS]
        if len(topics) >= MIN_VOCABULARY_TOPICS:
            return topics

        counts = Counter(
            word
            for word in vocab.WORD.findall(lowered)
            if len(word) > TOPIC_WORD_MIN_LENGTH and word not in vocab.STOP_WORDS
        )
        for word, _count in counts.most_common():
            if len(topics) >= MAX_TOPICS:
                break
            if word not in topics:
                topics.append(word)
        return topics
