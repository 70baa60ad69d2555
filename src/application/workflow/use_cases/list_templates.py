from src.domain.workflow.value_objects.template import (
    TemplateCatalog,
    WorkflowCategory,
    WorkflowTemplate,
)


class ListTemplatesUseCase:
    def __init__(self, catalog: TemplateCatalog):
        self._catalog = catalog

    async def execute(self, category: WorkflowCategory | None = None) -> list[WorkflowTemplate]:
        return self._catalog.find(category)
