from __future__ import annotations

from dataclasses import dataclass

from loguru import logger as default_logger

from area_engine.config.loader import ConfigLoader
from area_engine.config.schemas import BASE_GROUP, ShapesConfig
from area_engine.config.validation import RuntimeValidator
from area_engine.core.aggregation import AreaBreakdown, ShapeAreaCalculator
from area_engine.core.contracts import InMemoryRecordStore, LogNotifier, Notifier, RecordStore
from area_engine.core.report_service import AreaReport, AreaReportService
from area_engine.core.shape_registry import ShapeRegistry
from area_engine.core.shapes import Shape


@dataclass
class ExecutorContext:
    calculator: ShapeAreaCalculator
    registry: ShapeRegistry
    config: ShapesConfig

    def shapes(self, group: str = BASE_GROUP) -> list[Shape]:
        return [self.registry.create(item.type, item.dimensions()) for item in self.config.get_group(group)]


class ShapeAreaExecutor:
    def __init__(self, shapes_path: str, registry: ShapeRegistry | None = None, logger=default_logger) -> None:
        self.shapes_path = shapes_path
        self.registry = registry or ShapeRegistry.default()
        self.logger = logger

    def build(self) -> ExecutorContext:
        config = ConfigLoader.load_shapes_config(self.shapes_path)

        report = RuntimeValidator.validate_shapes(config, self.registry)
        for warning in report.warnings:
            self.logger.warning(warning)
        report.raise_for_errors()

        return ExecutorContext(calculator=ShapeAreaCalculator(), registry=self.registry, config=config)

    def run(self, group: str = BASE_GROUP) -> AreaBreakdown:
        context = self.build()
        breakdown = context.calculator.breakdown(context.shapes(group))
        self.logger.info("Group '{}': {} shapes, total area {:.6f}", group, breakdown.shape_count, breakdown.total)
        return breakdown

    def publish(
        self,
        report_name: str,
        group: str = BASE_GROUP,
        recipient: str | None = None,
        store: RecordStore | None = None,
        notifier: Notifier | None = None,
    ) -> AreaReport:
        context = self.build()
        service = AreaReportService(
            calculator=context.calculator,
            store=store if store is not None else InMemoryRecordStore(),
            notifier=notifier if notifier is not None else LogNotifier(self.logger),
            logger=self.logger,
        )
        return service.publish(report_name, context.shapes(group), recipient=recipient)
