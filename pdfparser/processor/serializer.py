from typing import Any

from pdfparser.analysis.models import AnalysisResult, InsuranceDetails
from pdfparser.classification.models import ClassificationResult
from pdfparser.pdf.models import DocumentMetadata
from pdfparser.processor.models import (
    Failed,
    ProcessingOutcome,
    ProcessingWarning,
    Protected,
)

PROTECTION_TYPE = "password_protected"


def serialize_outcome(
    outcome: ProcessingOutcome,
    *,
    filename: str | None = None,
    source_url: str | None = None,
) -> dict[str, Any]:
    """Convert a processing outcome into the JSON-ready response body."""
    result = outcome.result
    body: dict[str, Any] = {
        "success": result.success,
        "markdown": result.markdown,
        "classification": _classification(result.classification),
        "metadata": _metadata(result.metadata),
        "analysis": _analysis(result.analysis),
        "warnings": [_warning(w) for w in result.warnings],
        "processingMethod": result.processing_method.value if result.processing_method else None,
        "processingTime": result.elapsed_ms,
        "error": result.error.value if result.error else None,
    }

    if isinstance(outcome, Protected):
        if body["metadata"] is not None:
            body["metadata"]["isProtected"] = True
            body["metadata"]["protectionType"] = PROTECTION_TYPE
        if body["analysis"] is not None:
            body["analysis"]["error"] = result.error.value if result.error else None
    elif isinstance(outcome, Failed):
        body["error"] = outcome.error_code.value
        body["errorMessage"] = outcome.message

    if filename is not None:
        body["filename"] = filename
    if source_url is not None:
        body["sourceUrl"] = source_url
    return body


def _classification(classification: ClassificationResult | None) -> dict[str, Any] | None:
    if classification is None:
        return None
    return {
        "documentKind": classification.document_kind.value,
        "hasExtractableText": classification.has_extractable_text,
        "textCharacterCount": classification.text_character_count,
        "pageCount": classification.page_count,
        "requiresOcr": classification.requires_ocr,
        "hasFormFields": classification.has_form_fields,
        "isProtected": classification.is_protected,
        "extractionMethod": classification.extraction_method.value,
        "textQuality": classification.text_quality.value,
    }


def _metadata(metadata: DocumentMetadata | None) -> dict[str, Any] | None:
    if metadata is None:
        return None
    return {
        "title": metadata.title,
        "author": metadata.author,
        "subject": metadata.subject,
        "keywords": metadata.keywords,
        "creationDate": metadata.creation_date,
        "modificationDate": metadata.modification_date,
        "pageCount": metadata.page_count,
    }


def _analysis(analysis: AnalysisResult | None) -> dict[str, Any] | None:
    if analysis is None:
        return None
    return {
        "summary": analysis.summary,
        "mainTopics": list(analysis.main_topics),
        "keyPoints": list(analysis.key_points),
        "language": analysis.language,
        "documentType": analysis.document_type,
        "structuredData": _insurance_details(analysis.structured_data),
    }


def _insurance_details(details: InsuranceDetails | None) -> dict[str, Any] | None:
    if details is None:
        return None
    return {
        "policyNumber": details.policy_number,
        "claimNumber": details.claim_number,
        "insuredParty": details.insured_party,
        "effectiveDate": details.effective_date,
        "expirationDate": details.expiration_date,
        "premium": details.premium,
        "coverages": [{"type": c.type, "amount": c.amount} for c in details.coverages],
    }


def _warning(warning: ProcessingWarning) -> dict[str, str]:
    return {
        "kind": warning.kind.value,
        "message": warning.message,
        "severity": warning.severity.value,
    }
