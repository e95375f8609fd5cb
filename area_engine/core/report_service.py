from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from loguru import logger as default_logger

from area_engine.core.aggregation import ShapeAreaCalculator, ShapeContribution
from area_engine.core.contracts import DeliveryError, Notifier, RecordStore, StorageError
from area_engine.core.shapes import Shape


@dataclass
class AreaReport:
    name: str
    total_area: float
    shape_count: int
    created_at: str
    contributions: list[ShapeContribution] = field(default_factory=list)

    def as_record(self) -> dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        return f"Report '{self.name}': {self.shape_count} shapes, total area {self.total_area:.6f}"


class AreaReportService:
    """Computes a report, stores it and announces it.

    Each step goes through an injected collaborator. A storage failure aborts the
    publish; a delivery failure is logged and the stored report is still returned.
    """

    def __init__(
        self,
        calculator: ShapeAreaCalculator,
        store: RecordStore,
        notifier: Notifier,
        logger=default_logger,
    ) -> None:
        self.calculator = calculator
        self.store = store
        self.notifier = notifier
        self.logger = logger

    def publish(self, name: str, shapes: Iterable[Shape], recipient: str | None = None) -> AreaReport:
        breakdown = self.calculator.breakdown(shapes)
        report = AreaReport(
            name=name,
            total_area=breakdown.total,
            shape_count=breakdown.shape_count,
            created_at=datetime.now(timezone.utc).isoformat(),
            contributions=breakdown.contributions,
        )

        try:
            self.store.save(report.as_record())
        except StorageError as error:
            self.logger.error("Failed to store report '{}': {}", name, error)
            raise
        self.logger.debug("Stored report '{}' ({} shapes)", name, report.shape_count)

        if recipient is not None:
            try:
                self.notifier.notify(recipient, report.summary())
            except DeliveryError as error:
                self.logger.warning("Report '{}' stored but notification to '{}' failed: {}", name, recipient, error)

        return report
