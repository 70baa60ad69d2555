from enum import Enum


class NodeType(str, Enum):
    """
    Variant tag of a workflow node.

    States:
        TRIGGER: Graph root, defines the event that starts the workflow.
        CONDITION: Branch point with "yes"/"no" successors.
        ACTION: Side-effecting step (send message, tag contact, webhook...).
        DELAY: Pause step, measured in seconds.
        END: Explicit terminal step.
    """

    TRIGGER = "trigger"
    CONDITION = "condition"
    ACTION = "action"
    DELAY = "delay"
    END = "end"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    NodeType.TRIGGER: "Trigger",
    NodeType.CONDITION: "Condition",
    NodeType.ACTION: "Action",
    NodeType.DELAY: "Delay",
    NodeType.END: "End",
}


class TriggerType(str, Enum):
    MESSAGE_RECEIVED = "message_received"
    KEYWORD = "keyword"
    SCHEDULE = "schedule"
    WEBHOOK = "webhook"
    MANUAL = "manual"


class ActionType(str, Enum):
    SEND_MESSAGE = "send_message"
    SEND_MEDIA = "send_media"
    ADD_TAG = "add_tag"
    REMOVE_TAG = "remove_tag"
    ASSIGN_AGENT = "assign_agent"
    WEBHOOK = "webhook"
    SAVE_DATA = "save_data"


class ConditionType(str, Enum):
    TEXT_CONTAINS = "text_contains"
    TEXT_EQUALS = "text_equals"
    USER_TAG = "user_tag"
    TIME_RANGE = "time_range"
    CUSTOM = "custom"
