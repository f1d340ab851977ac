"""Line-oriented command loop over the job repository, rendered with Rich."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from models import Posting
from repository import JobRepository, newest_first

PROMPT = ">> "
NOT_AVAILABLE = "Not available"
SEPARATOR = "+" + "-" * 98 + "+"

FETCH_JOBS = "fetch jobs"
REFRESH = "refresh"
SOURCES = "sources"
EXIT = "exit"


def render_posting(job: Posting) -> Text:
    """Labelled multi-line view of a posting; empty fields show as not available."""
    tags = f"[ {', '.join(job.tags)} ]" if job.tags else NOT_AVAILABLE
    rows = (
        ("Position:", job.title, "green"),
        ("Company:", job.company, "green"),
        ("Date Posted:", job.date_posted, "green"),
        ("Location:", job.location or NOT_AVAILABLE, "green"),
        ("Remuneration:", job.remuneration or NOT_AVAILABLE, "green"),
        ("Tags:", tags, "green"),
        ("Apply:", job.apply_link or NOT_AVAILABLE, "bright_blue" if job.apply_link else "green"),
        ("Site:", job.source, "bright_blue"),
    )
    text = Text()
    for label, value, style in rows:
        text.append(label, style="bold bright_green")
        text.append(" ")
        text.append(value, style=style)
        text.append("\n")
    text.append("\n")
    text.append(SEPARATOR, style="green")
    return text


class JobHuntRepl:
    def __init__(
        self,
        repository: JobRepository,
        reader: Optional[TextIO] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.repository = repository
        self.reader = reader or sys.stdin
        self.console = console or Console(highlight=False)

    def say(self, message: str) -> None:
        self.console.print(f"[bold green]{escape(message)}[/bold green]")

    def run(self) -> None:
        self.say("Populating/indexing local datastore...")
        self.repository.refresh()
        self.say("Population/indexing completed successfully! Please begin your job hunt by entering a query:")

        while True:
            self.console.print(PROMPT, end="")
            line = self.reader.readline()
            if not line:
                break
            if not self.handle(line.rstrip("\n")):
                break

        self.say("\nThank you for using Job Hunt. Goodbye!")

    def handle(self, line: str) -> bool:
        """Run one command; False means the loop should stop."""
        command = line.strip()
        if command == EXIT:
            return False
        if command == FETCH_JOBS:
            self.show_jobs()
        elif command == REFRESH:
            self.say("Refreshing...")
            self.repository.refresh()
            self.say("Refresh completed successfully!")
        elif command == SOURCES:
            self.show_sources()
        else:
            self.say(f'"{line}" is not a valid command')
        return True

    def show_jobs(self) -> None:
        jobs = self.repository.all()
        for job in newest_first(jobs):
            self.console.print(render_posting(job))
        self.say(f"{len(jobs)} items returned")

    def show_sources(self) -> None:
        snapshot = self.repository.snapshot
        table = Table(title="[bold]Sources[/bold]", show_header=True, header_style="bold cyan")
        table.add_column("Source", style="white")
        table.add_column("Status")
        table.add_column("Jobs", justify="right")
        table.add_column("Error", style="red")
        for report in snapshot.reports:
            status = "[green]ok[/green]" if report.ok else "[red]failed[/red]"
            table.add_row(escape(report.source), status, str(report.count), escape(report.error or ""))
        self.console.print(table)
