from __future__ import annotations

from pathlib import Path
import logging
import time
from typing import Callable, Optional

from .. import config
from ..models import AgendaState, ExportResult, ExportStatus
from ..storage import artifact_path, temp_artifact_path
from .backend import BackendUnavailableError, DrawingBackend, ReportLabBackend
from .layout import layout_for_paper
from .render_pdf import ProgressCallback, render_agenda


BackendFactory = Callable[[Path, tuple], DrawingBackend]
logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    def __init__(self, message: str, result: Optional[ExportResult] = None) -> None:
        super().__init__(message)
        self.result = result or ExportResult(path=None, page_count=0, status=ExportStatus.FAILED)


def _acquire_backend(factory: Optional[BackendFactory], path: Path, page_size: tuple) -> DrawingBackend:
    if factory is None:
        raise BackendUnavailableError("PDF backend is not available yet. Please try again in a few seconds.")
    try:
        return factory(path, page_size)
    except Exception as exc:
        raise BackendUnavailableError(f"PDF backend could not be started: {exc}") from exc


def export_agenda(
    state: AgendaState,
    out_dir: Optional[Path] = None,
    paper: str = "letter",
    backend_factory: Optional[BackendFactory] = ReportLabBackend,
    progress: Optional[ProgressCallback] = None,
    start_delay: float = config.EXPORT_START_DELAY,
) -> ExportResult:
    """
    Render every week of ``state`` to ``Weekly_Agenda_<start>_to_<end>.pdf``.

    Pages are written to a temporary file that only replaces the final path
    once the document is saved; a failed export leaves nothing behind.
    Progress goes back to 0 whether the export succeeds or fails.
    """
    report = progress or (lambda value: None)
    if not state.weeks:
        raise ExportError("No weeks to export. Check the date range and regenerate.")

    layout = layout_for_paper(paper)
    page_size = (layout.page_width, layout.page_height)
    final_path = artifact_path(state.start, state.end, base_dir=out_dir)
    temp_path = temp_artifact_path(state.start, state.end, base_dir=out_dir)

    backend = _acquire_backend(backend_factory, temp_path, page_size)

    logger.info("Exporting %d weeks to %s", len(state.weeks), final_path)
    completed: list[int] = []

    def on_page(value: int) -> None:
        completed.append(value)
        report(value)

    report(config.PROGRESS_STARTED)
    try:
        if start_delay > 0:
            time.sleep(start_delay)
        pages = render_agenda(state.weeks, layout, state.holiday_lookup(), backend, progress=on_page)
        backend.save()
        if temp_path.exists():
            temp_path.replace(final_path)
    except Exception as exc:
        logger.exception("Agenda export failed for %s to %s", state.start, state.end)
        temp_path.unlink(missing_ok=True)
        failed = ExportResult(path=None, page_count=len(completed), status=ExportStatus.FAILED)
        raise ExportError(f"Error generating PDF: {exc}", result=failed) from exc
    finally:
        report(0)

    logger.info("Saved %d pages to %s", pages, final_path)
    return ExportResult(path=final_path, page_count=pages, status=ExportStatus.DONE)
