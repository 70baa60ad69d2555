from src.domain.workflow.services.workflow_validator import validate_workflow
from src.domain.workflow.value_objects.template import TemplateCatalog, WorkflowCategory


def test_builtin_catalog_contents():
    catalog = TemplateCatalog.builtin()

    assert sorted(catalog.templates) == ["keyword-template", "welcome-template"]
    assert catalog.get("welcome-template").name == "Automatic Welcome"
    assert catalog.get("missing") is None


def test_find_by_category():
    catalog = TemplateCatalog.builtin()

    assert [t.id for t in catalog.find(WorkflowCategory.AUTOMATION)] == ["keyword-template"]
    assert catalog.find(WorkflowCategory.SALES) == []
    assert len(catalog.find()) == 2


def test_builtin_templates_pass_validation_cleanly():
    for template in TemplateCatalog.builtin().find():
        result = validate_workflow(list(template.nodes))
        assert result.is_valid, template.id
        assert result.warnings == (), template.id
