from pdfparser.enrichment.dispatcher import DispatcherConfig, RemoteCallDispatcher
from pdfparser.enrichment.enricher import RemoteEnricher
from pdfparser.enrichment.factory import EnrichmentClientFactory, build_enricher

__all__ = [
    "DispatcherConfig",
    "EnrichmentClientFactory",
    "RemoteCallDispatcher",
    "RemoteEnricher",
    "build_enricher",
]
