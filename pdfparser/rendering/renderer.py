from pdfparser.classification.models import ClassificationResult, DocumentKind
from pdfparser.rendering.builder import MarkdownBuilder
from pdfparser.rendering.form import FormRenderer
from pdfparser.rendering.general import GeneralRenderer
from pdfparser.rendering.insurance import InsuranceRenderer, is_insurance_text

TITLE_EMPTY = "Documento sin texto extraíble"
TITLE_INSURANCE = "Póliza de Seguro"
TITLE_FORM = "Formulario"
TITLE_GENERAL = "Documento"


def classification_summary(classification: ClassificationResult) -> str:
    return (
        f"**Tipo:** {classification.document_kind.value} · "
        f"**Páginas:** {classification.page_count} · "
        f"**Calidad del texto:** {classification.text_quality.value}"
    )


class LocalMarkdownRenderer:
    """Rule-based text to markdown conversion used without the remote service.

    Pure and total: the same input always yields the same markdown.
    """

    def __init__(self) -> None:
        self._insurance = InsuranceRenderer()
        self._form = FormRenderer()
        self._general = GeneralRenderer()

    def render(self, text: str, classification: ClassificationResult) -> str:
        if not text or not text.strip():
            return self._render_empty(classification)

        lines = text.splitlines()
        builder = MarkdownBuilder()
        if is_insurance_text(text):
            builder.heading(TITLE_INSURANCE, 1)
            builder.quote(classification_summary(classification))
            self._insurance.render_body(lines, builder)
        elif classification.document_kind is DocumentKind.FORM_BASED:
            builder.heading(TITLE_FORM, 1)
            builder.quote(classification_summary(classification))
            self._form.render_body(lines, builder)
        else:
            builder.heading(TITLE_GENERAL, 1)
            builder.quote(classification_summary(classification))
            self._general.render_body(lines, builder)
        return builder.build()

    @staticmethod
    def _render_empty(classification: ClassificationResult) -> str:
        builder = MarkdownBuilder()
        builder.heading(TITLE_EMPTY, 1)
        builder.paragraph(
            "_no extractable text: no se encontró texto extraíble en este PDF._"
        )
        builder.item(f"**Tipo de documento:** {classification.document_kind.value}")
        builder.item(f"**Páginas:** {classification.page_count}")
        builder.item(f"**Requiere OCR:** {'sí' if classification.requires_ocr else 'no'}")
        builder.item(f"**Calidad del texto:** {classification.text_quality.value}")
        return builder.build()
