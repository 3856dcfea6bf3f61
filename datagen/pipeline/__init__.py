"""Stage sequencing for a full dataset run."""
from __future__ import annotations

from datagen.pipeline.files import OutputFile
from datagen.pipeline.orchestrator import DataOrchestrator, RunSummary
from datagen.pipeline.service import StageResult, generate_and_save

__all__ = ["DataOrchestrator", "OutputFile", "RunSummary", "StageResult", "generate_and_save"]
