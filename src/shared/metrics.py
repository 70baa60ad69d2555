from prometheus_client import Counter

from src.ports.secondary.metrics import IMetrics


class MetricsRegistry(IMetrics):
    """Prometheus metrics registry."""

    def __init__(self):
        self.WORKFLOW_VALIDATIONS_TOTAL = Counter(
            "workflow_validations_total",
            "Total number of workflow validations",
            ["outcome"],
        )

        self.WORKFLOW_MUTATIONS_TOTAL = Counter(
            "workflow_mutations_total",
            "Total number of persisted workflow changes",
            ["operation"],
        )

        self.WORKFLOW_EXECUTION_REQUESTS_TOTAL = Counter(
            "workflow_execution_requests_total",
            "Total number of execution requests handed to the automation engine",
        )

    def record_validation(self, is_valid: bool) -> None:
        self.WORKFLOW_VALIDATIONS_TOTAL.labels(outcome="valid" if is_valid else "invalid").inc()

    def record_mutation(self, operation: str) -> None:
        self.WORKFLOW_MUTATIONS_TOTAL.labels(operation=operation).inc()

    def record_execution_request(self) -> None:
        self.WORKFLOW_EXECUTION_REQUESTS_TOTAL.inc()


# Global registry instance for adapter/framework layer
metrics_registry = MetricsRegistry()
