from dataclasses import dataclass, field
from enum import Enum

from src.domain.workflow.entities.node import WorkflowNode, parse_nodes


class WorkflowCategory(str, Enum):
    CUSTOMER_SERVICE = "customer_service"
    SALES = "sales"
    MARKETING = "marketing"
    AUTOMATION = "automation"
    CUSTOM = "custom"


@dataclass(frozen=True)
class WorkflowTemplate:
    id: str
    name: str
    description: str
    category: WorkflowCategory
    nodes: tuple[WorkflowNode, ...]
    is_public: bool = True
    preview_image: str | None = None


_BUILTIN_TEMPLATES = [
    {
        "id": "welcome-template",
        "name": "Automatic Welcome",
        "description": "Sends a welcome message to new contacts",
        "category": WorkflowCategory.CUSTOMER_SERVICE,
        "nodes": [
            {
                "id": "trigger-1",
                "type": "trigger",
                "position": {"x": 100, "y": 100},
                "data": {
                    "label": "New Message",
                    "trigger": {"type": "message_received", "config": {"messageType": "any"}},
                },
                "connections": ["action-1"],
            },
            {
                "id": "action-1",
                "type": "action",
                "position": {"x": 300, "y": 100},
                "data": {
                    "label": "Send Welcome",
                    "action": {
                        "type": "send_message",
                        "config": {"message": "Hello! Welcome to our support. How can we help you?"},
                    },
                },
                "connections": ["end-1"],
            },
            {
                "id": "end-1",
                "type": "end",
                "position": {"x": 500, "y": 100},
                "data": {"label": "End"},
            },
        ],
    },
    {
        "id": "keyword-template",
        "name": "Keyword Reply",
        "description": "Replies automatically based on keywords",
        "category": WorkflowCategory.AUTOMATION,
        "nodes": [
            {
                "id": "trigger-1",
                "type": "trigger",
                "position": {"x": 100, "y": 100},
                "data": {
                    "label": "Keyword: price",
                    "trigger": {
                        "type": "keyword",
                        "config": {
                            "keywords": ["price", "cost", "how much"],
                            "caseSensitive": False,
                        },
                    },
                },
                "connections": ["action-1"],
            },
            {
                "id": "action-1",
                "type": "action",
                "position": {"x": 300, "y": 100},
                "data": {
                    "label": "Send Price List",
                    "action": {
                        "type": "send_message",
                        "config": {
                            "message": "Here are our prices:\n\nBasic: 29.90\nPro: 59.90\nEnterprise: 99.90"
                        },
                    },
                },
                "connections": ["end-1"],
            },
            {
                "id": "end-1",
                "type": "end",
                "position": {"x": 500, "y": 100},
                "data": {"label": "End"},
            },
        ],
    },
]


@dataclass
class TemplateCatalog:
    """In-process catalog of workflow templates, keyed by template id."""

    templates: dict[str, WorkflowTemplate] = field(default_factory=dict)

    @classmethod
    def builtin(cls) -> "TemplateCatalog":
        catalog = cls()
        for raw in _BUILTIN_TEMPLATES:
            catalog.add(
                WorkflowTemplate(
                    id=raw["id"],
                    name=raw["name"],
                    description=raw["description"],
                    category=raw["category"],
                    nodes=tuple(parse_nodes(raw["nodes"])),
                )
            )
        return catalog

    def add(self, template: WorkflowTemplate) -> None:
        self.templates[template.id] = template

    def get(self, template_id: str) -> WorkflowTemplate | None:
        return self.templates.get(template_id)

    def find(self, category: WorkflowCategory | None = None) -> list[WorkflowTemplate]:
        return [
            template
            for template in self.templates.values()
            if category is None or template.category == category
        ]
