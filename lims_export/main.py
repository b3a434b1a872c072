# main.py
"""Command line entry point for the LIMS spreadsheet export."""

import os
import sys
from typing import Optional

from lims_export.config import BACKENDS, Config
from lims_export.core.document_source import load_documents
from lims_export.core.export_pipeline import ExportPipeline
from lims_export.logger.logger import Logger
from lims_export.utils import ProgressTracker

USAGE = f"Usage: python -m lims_export.main [documents.json|documents.jsonl] [{'|'.join(BACKENDS)}]"


def get_user_input() -> tuple[str, Optional[str]]:
    """Ask for the document file and the backend."""
    tracker = ProgressTracker()

    tracker.print_info("\n📄 Document Selection")
    path = ""
    while not path:
        path = input("\nEnter path of the document file (.json or .jsonl): ").strip()
        if path and not os.path.exists(path):
            tracker.print_error(f"File not found: {path}")
            path = ""

    backend = input(f"Enter backend ({', '.join(BACKENDS)}) or press Enter for default: ").strip().lower()
    if backend and backend not in BACKENDS:
        tracker.print_error("Invalid backend, using configured default")
        backend = ""

    return path, backend or None


def run_export(path: str, backend: Optional[str] = None) -> bool:
    """
    Export all documents of a file.

    Args:
        path: Document file
        backend: Optional backend overriding EXPORT_BACKEND

    Returns:
        True if every exporter call succeeded
    """
    if backend:
        os.environ["EXPORT_BACKEND"] = backend

    config = Config()
    Logger.setup(name="LIMS_Export", level=config.log_level, log_file=config.log_file)

    pipeline = ExportPipeline(config)
    results = pipeline.run(load_documents(path))
    return all(results)


def main():
    """Main entry point for the application."""
    tracker = ProgressTracker()

    try:
        tracker.print_header("LIMS Export Tool")
        path, backend = get_user_input()
        input("\nPress Enter to start export...")

        if run_export(path, backend):
            tracker.print_info("\n🎉 [bold green]Export completed![/bold green]")
        else:
            tracker.print_warning("Export completed with errors, see log for details")

    except KeyboardInterrupt:
        tracker.print_warning("\n\n⚠️  Process interrupted by user")
        Logger.warning("Process interrupted by user")
    except Exception as e:
        tracker.print_error(f"\n❌ [bold red]Export error: {str(e)}[/bold red]")
        Logger.error(f"Export failed: {str(e)}", exc_info=True)
        raise


def run_batch_mode(path: str, backend: Optional[str] = None) -> int:
    """Run in batch mode without user interaction."""
    try:
        return 0 if run_export(path, backend) else 1
    except Exception as e:
        ProgressTracker().print_error(f"Export error: {str(e)}")
        Logger.error(f"Export failed: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    # Check for command line arguments for batch mode
    if len(sys.argv) in (2, 3):
        if len(sys.argv) == 3 and sys.argv[2] not in BACKENDS:
            print(USAGE)
            sys.exit(1)
        sys.exit(run_batch_mode(*sys.argv[1:]))
    elif len(sys.argv) > 3:
        print(USAGE)
        sys.exit(1)
    else:
        # Interactive mode
        main()
