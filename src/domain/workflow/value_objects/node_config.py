from dataclasses import dataclass, field, fields

from src.domain.workflow.value_objects.node_type import ActionType, ConditionType, TriggerType


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _coerce(kind, value):
    # Wrongly-typed values degrade to "absent" so they surface as validation errors.
    if kind == tuple[str, ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(item for item in value if isinstance(item, str))
    if kind == dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(k): str(v) for k, v in value.items()}
    if kind == (bool | None):
        return value if isinstance(value, bool) else None
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class NodeConfig:
    """
    Base class for the sub-type specific configuration of a node.

    Field names are snake_case; on the wire they are the editor's camelCase keys
    (``webhook_url`` <-> ``webhookUrl``).
    """

    @classmethod
    def from_json(cls, data) -> "NodeConfig":
        if not isinstance(data, dict):
            data = {}
        return cls(**{f.name: _coerce(f.type, data.get(_camel(f.name))) for f in fields(cls)})

    def to_json(self) -> dict:
        payload = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            payload[_camel(f.name)] = list(value) if isinstance(value, tuple) else value
        return payload

    def issues(self) -> list[str]:
        """Returns one message per missing required field."""
        return []


# === Triggers ===


@dataclass(frozen=True)
class MessageReceivedTriggerConfig(NodeConfig):
    message_type: str | None = None


@dataclass(frozen=True)
class KeywordTriggerConfig(NodeConfig):
    keywords: tuple[str, ...] = ()
    case_sensitive: bool | None = None
    exact_match: bool | None = None

    def issues(self) -> list[str]:
        if all(_blank(keyword) for keyword in self.keywords):
            return ["keywords not configured"]
        return []


@dataclass(frozen=True)
class ScheduleTriggerConfig(NodeConfig):
    schedule_type: str | None = None
    date: str | None = None
    time: str | None = None
    recurrence: str | None = None

    def issues(self) -> list[str]:
        return ["schedule time not configured"] if _blank(self.time) else []


@dataclass(frozen=True)
class WebhookTriggerConfig(NodeConfig):
    webhook_url: str | None = None
    webhook_secret: str | None = None

    def issues(self) -> list[str]:
        return ["webhook URL not configured"] if _blank(self.webhook_url) else []


@dataclass(frozen=True)
class ManualTriggerConfig(NodeConfig):
    pass


# === Actions ===


@dataclass(frozen=True)
class SendMessageConfig(NodeConfig):
    message: str | None = None
    message_template: str | None = None

    def issues(self) -> list[str]:
        return ["message not configured"] if _blank(self.message) else []


@dataclass(frozen=True)
class SendMediaConfig(NodeConfig):
    media_type: str | None = None
    media_url: str | None = None
    caption: str | None = None


@dataclass(frozen=True)
class TagActionConfig(NodeConfig):
    tag: str | None = None

    def issues(self) -> list[str]:
        return ["tag not configured"] if _blank(self.tag) else []


@dataclass(frozen=True)
class AssignAgentConfig(NodeConfig):
    agent_id: str | None = None
    agent_email: str | None = None

    def issues(self) -> list[str]:
        return ["agent email not configured"] if _blank(self.agent_email) else []


@dataclass(frozen=True)
class WebhookActionConfig(NodeConfig):
    webhook_url: str | None = None
    webhook_method: str | None = None
    webhook_headers: dict[str, str] = field(default_factory=dict)
    webhook_body: str | None = None

    def issues(self) -> list[str]:
        return ["webhook URL not configured"] if _blank(self.webhook_url) else []


@dataclass(frozen=True)
class SaveDataConfig(NodeConfig):
    data_key: str | None = None
    data_value: str | None = None


# === Conditions ===


@dataclass(frozen=True)
class TextConditionConfig(NodeConfig):
    text: str | None = None
    case_sensitive: bool | None = None

    def issues(self) -> list[str]:
        return ["text to match not configured"] if _blank(self.text) else []


@dataclass(frozen=True)
class UserTagConditionConfig(NodeConfig):
    tag: str | None = None
    has_tag: bool | None = None

    def issues(self) -> list[str]:
        return ["tag to check not configured"] if _blank(self.tag) else []


@dataclass(frozen=True)
class TimeRangeConditionConfig(NodeConfig):
    start_time: str | None = None
    end_time: str | None = None

    def issues(self) -> list[str]:
        if _blank(self.start_time) or _blank(self.end_time):
            return ["start and end times not configured"]
        return []


@dataclass(frozen=True)
class CustomConditionConfig(NodeConfig):
    custom_script: str | None = None


TRIGGER_CONFIGS: dict[TriggerType, type[NodeConfig]] = {
    TriggerType.MESSAGE_RECEIVED: MessageReceivedTriggerConfig,
    TriggerType.KEYWORD: KeywordTriggerConfig,
    TriggerType.SCHEDULE: ScheduleTriggerConfig,
    TriggerType.WEBHOOK: WebhookTriggerConfig,
    TriggerType.MANUAL: ManualTriggerConfig,
}

ACTION_CONFIGS: dict[ActionType, type[NodeConfig]] = {
    ActionType.SEND_MESSAGE: SendMessageConfig,
    ActionType.SEND_MEDIA: SendMediaConfig,
    ActionType.ADD_TAG: TagActionConfig,
    ActionType.REMOVE_TAG: TagActionConfig,
    ActionType.ASSIGN_AGENT: AssignAgentConfig,
    ActionType.WEBHOOK: WebhookActionConfig,
    ActionType.SAVE_DATA: SaveDataConfig,
}

CONDITION_CONFIGS: dict[ConditionType, type[NodeConfig]] = {
    ConditionType.TEXT_CONTAINS: TextConditionConfig,
    ConditionType.TEXT_EQUALS: TextConditionConfig,
    ConditionType.USER_TAG: UserTagConditionConfig,
    ConditionType.TIME_RANGE: TimeRangeConditionConfig,
    ConditionType.CUSTOM: CustomConditionConfig,
}
