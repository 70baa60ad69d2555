from src.domain.workflow.entities.workflow import Workflow
from src.domain.workflow.exceptions import TemplateNotFoundError
from src.domain.workflow.value_objects.template import TemplateCatalog
from src.ports.secondary.workflow_repository import IWorkflowRepository


class CreateFromTemplateUseCase:
    def __init__(self, workflow_repository: IWorkflowRepository, catalog: TemplateCatalog):
        self._workflow_repository = workflow_repository
        self._catalog = catalog

    async def execute(
        self,
        template_id: str,
        tenant_id: str,
        created_by: str,
        name: str | None = None,
    ) -> Workflow:
        """
        Instantiates a catalog template as a new, inactive workflow of the tenant.

        Templates ship valid graphs, so no validation runs here; activation still
        goes through the save gate like any other workflow.
        """
        template = self._catalog.get(template_id)
        if not template:
            raise TemplateNotFoundError(template_id)

        workflow = Workflow(
            name=name or f"{template.name} (Copy)",
            description=template.description,
            tenant_id=tenant_id,
            created_by=created_by,
            nodes=list(template.nodes),
        )
        await self._workflow_repository.save(workflow)
        return workflow
