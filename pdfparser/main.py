import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from pdfparser.claims.exceptions import ClaimsExtractionError
from pdfparser.claims.extractor import build_claims_extractor
from pdfparser.claims.models import ClaimsDocument
from pdfparser.config.settings import Settings
from pdfparser.database.connection import close_pool, init_pool
from pdfparser.enrichment.dispatcher import DispatcherConfig, RemoteCallDispatcher
from pdfparser.logging.logger import Log
from pdfparser.processor.exceptions import ProcessorError
from pdfparser.processor.file_loader import FileLoader
from pdfparser.processor.models import DEFAULT_MAX_TOKENS, ExtractionOptions
from pdfparser.processor.processor import build_processor
from pdfparser.processor.serializer import serialize_outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdfparser",
        description="Classify PDF documents and convert them to markdown.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_file = subparsers.add_parser("parse", help="Process a local PDF file")
    parse_file.add_argument("file", type=Path)
    _add_extraction_flags(parse_file)

    parse_url = subparsers.add_parser("parse-url", help="Download and process a PDF")
    parse_url.add_argument("url")
    _add_extraction_flags(parse_url)

    claims = subparsers.add_parser("claims", help="Extract configured fields from PDFs")
    claims.add_argument("files", type=Path, nargs="+")
    return parser


def _add_extraction_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--instructions", default=None, help="Extra instructions for the AI")
    parser.add_argument("--no-analysis", action="store_true", help="Skip content analysis")
    parser.add_argument("--no-metadata", action="store_true", help="Skip metadata extraction")
    parser.add_argument("--max-tokens", type=int, default=DEFAULT_MAX_TOKENS)
    parser.add_argument("--local", action="store_true", help="Force local processing")


def options_from_args(args: argparse.Namespace) -> ExtractionOptions:
    return ExtractionOptions(
        instructions=args.instructions,
        include_analysis=not args.no_analysis,
        extract_metadata=not args.no_metadata,
        max_tokens=args.max_tokens,
        use_local_processing=args.local,
    )


async def run_parse(settings: Settings, args: argparse.Namespace) -> dict[str, Any]:
    options = options_from_args(args)
    processor = build_processor(settings)
    try:
        if args.command == "parse-url":
            outcome = await processor.process_url(args.url, options)
            return serialize_outcome(outcome, source_url=args.url)
        pdf_bytes = FileLoader(settings.max_file_size).load(args.file)
        outcome = await processor.process(pdf_bytes, options)
        return serialize_outcome(outcome, filename=args.file.name)
    finally:
        await processor.aclose()


async def run_claims(settings: Settings, args: argparse.Namespace) -> dict[str, Any]:
    loader = FileLoader(settings.max_file_size)
    documents = [
        ClaimsDocument(filename=path.name, content=loader.load(path)) for path in args.files
    ]
    dispatcher = RemoteCallDispatcher(DispatcherConfig.from_settings(settings))
    init_pool(settings)
    try:
        extractor = build_claims_extractor(settings, dispatcher)
        result = await extractor.extract_from_documents(documents)
        return result.to_dict()
    finally:
        await dispatcher.aclose()
        close_pool()


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse arguments -> load settings -> run command -> print JSON."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        if args.command == "claims":
            body = asyncio.run(run_claims(settings, args))
        else:
            body = asyncio.run(run_parse(settings, args))
    except (ProcessorError, ClaimsExtractionError, FileNotFoundError) as exc:
        Log.error(f"{type(exc).__name__}: {exc}")
        body = {"success": False, "error": type(exc).__name__, "errorMessage": str(exc)}

    print(json.dumps(body, ensure_ascii=False, indent=2))
    return 0 if body.get("success") else 1


if __name__ == "__main__":
    sys.exit(main())
