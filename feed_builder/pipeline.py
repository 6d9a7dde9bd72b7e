"""Feed build pipeline: scan, extract, order, render, write."""

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from pathlib import Path

from .assembler import FeedAssembler, OutputWriteError
from .config import Config
from .extractor import load_document
from .logging_config import create_execution_logger
from .models import BuildResult, Document, DocumentFailure
from .scanner import PathScanner, ScanError


class FeedPipeline:
    """Runs one full regeneration of the feed."""

    def __init__(self, config: Config, execution_id: str | None = None):
        self.config = config
        self.execution_id = (
            execution_id or f"build_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
        )
        self.logger = create_execution_logger("main", self.execution_id)

    def extract_all(
        self, paths: list[Path]
    ) -> tuple[list[Document], list[DocumentFailure]]:
        """Read and extract every document concurrently.

        Results are collected in input order once every task has finished.
        A document that cannot be read or extracted is reported and skipped
        without affecting the others.
        """
        documents: list[Document] = []
        failures: list[DocumentFailure] = []
        if not paths:
            return documents, failures

        root = self.config.root_dir
        workers = min(len(paths), self.config.max_workers)
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [
                (
                    path,
                    ex.submit(
                        load_document,
                        root,
                        path,
                        self.config.description_chars,
                        self.config.UNTITLED_PLACEHOLDER,
                    ),
                )
                for path in paths
            ]

        for path, future in futures:
            try:
                document = future.result()
            except Exception as e:
                relative = path.relative_to(root).as_posix()
                failures.append(DocumentFailure(path=relative, error=str(e)))
                self.logger.log_document_processing(
                    relative, "skipped", success=False, error=str(e)
                )
                continue

            documents.append(document)
            self.logger.log_document_processing(document.path, "extracted")
            if document.published is None:
                self.logger.warning(
                    f"No date found in path, treating as undated: {document.path}",
                    document_path=document.path,
                )

        return documents, failures

    def run(self) -> BuildResult:
        """Run the pipeline end to end.

        Raises:
            ScanError: If the content root cannot be read
            OutputWriteError: If the feed cannot be written
        """
        self.logger.log_execution_start(
            root_dir=self.config.root_dir, output_path=self.config.output_path
        )
        result = BuildResult(
            execution_id=self.execution_id, output_path=self.config.output_path
        )

        scan = PathScanner(self.config.root_dir, self.execution_id).scan()
        documents, failures = self.extract_all(scan.paths)
        result.failures = scan.failures + failures

        assembler = FeedAssembler(
            self.config.get_channel_config(),
            self.config.link_prefix,
            execution_id=self.execution_id,
        )
        assembler.write(assembler.render(documents), self.config.output_path)

        result.item_count = len(documents)
        result.metrics = {
            "documents_found": len(scan.paths),
            "documents_included": len(documents),
            "documents_failed": len(result.failures),
            "documents_undated": sum(1 for d in documents if d.published is None),
        }
        self.logger.log_metrics(result.metrics)
        self.logger.log_execution_end(success=True, metrics=result.metrics)
        return result


def build_feed(config: Config | None = None, execution_id: str | None = None) -> BuildResult:
    """Build the feed, reporting fatal errors in the result instead of raising."""
    config = config or Config()
    pipeline = FeedPipeline(config, execution_id)
    try:
        return pipeline.run()
    except (ScanError, OutputWriteError) as e:
        error_msg = f"Feed build failed: {e}"
        pipeline.logger.error(error_msg, error=str(e))
        pipeline.logger.log_execution_end(success=False, error=error_msg)
        return BuildResult(
            execution_id=pipeline.execution_id,
            output_path=config.output_path,
            success=False,
            error=error_msg,
        )
