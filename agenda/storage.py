from __future__ import annotations

from pathlib import Path

from . import config


def agenda_filename(start: str, end: str) -> str:
    return f"Weekly_Agenda_{start}_to_{end}.pdf"


def output_dir(base_dir: Path | None = None) -> Path:
    path = base_dir or config.OUT_DIR
    path.mkdir(parents=True, exist_ok=True)
    return path


def artifact_path(start: str, end: str, base_dir: Path | None = None) -> Path:
    return output_dir(base_dir) / agenda_filename(start, end)


def temp_artifact_path(start: str, end: str, base_dir: Path | None = None) -> Path:
    final = artifact_path(start, end, base_dir=base_dir)
    return final.with_name(final.name + ".tmp")


def preview_path(start: str, end: str, index: int, base_dir: Path | None = None) -> Path:
    return output_dir(base_dir) / f"Weekly_Agenda_{start}_to_{end}_preview_{index}.png"
