"""Run report model."""

from dataclasses import dataclass

from .CountOptions import CountOptions
from .CountResult import CountResult


@dataclass
class RunReport:
    results: list[CountResult]
    options: CountOptions
