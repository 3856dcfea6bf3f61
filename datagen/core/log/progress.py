"""Row progress bars rendered with rich."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)


@dataclass
class _Task:
    progress: Optional[Progress]
    task_id: Optional[TaskID]

    def advance(self, amount: float = 1.0) -> None:
        if self.progress is not None and self.task_id is not None:
            self.progress.advance(self.task_id, amount)


class ProgressManager:
    """Create transient progress bars that share the logging console."""

    def __init__(self) -> None:
        self._console: Console = Console()
        self.enabled = True

    def use_console(self, console: Console) -> None:
        self._console = console

    def reset_console(self) -> None:
        self._console = Console()

    def _columns(self, total_known: bool) -> list[object]:
        columns: list[object] = [TextColumn("[bold blue]{task.description}[/]")]
        if total_known:
            columns += [BarColumn(bar_width=None), TaskProgressColumn(), MofNCompleteColumn(), TimeRemainingColumn()]
        else:
            columns.append(TextColumn("{task.completed:,.0f}"))
        columns.append(TimeElapsedColumn())
        return columns

    @contextmanager
    def task(self, description: str, *, total: Optional[float] = None) -> Iterator[_Task]:
        if not self.enabled:
            yield _Task(None, None)
            return
        progress = Progress(*self._columns(total is not None), console=self._console, transient=True)
        with progress:
            task_id = progress.add_task(description, total=total)
            yield _Task(progress, task_id)


progress_manager = ProgressManager()
