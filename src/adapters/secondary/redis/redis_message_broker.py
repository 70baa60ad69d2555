import json

import redis.asyncio as redis

from src.ports.secondary.message_broker import ExecutionRequestMessage, IMessageBroker
from src.shared.config import settings


class RedisMessageBroker(IMessageBroker):
    """Redis Streams implementation; the automation engine reads the stream with its own consumer group."""

    EXECUTION_STREAM = settings.STREAM_EXECUTION_KEY
    MAX_LEN = settings.STREAM_MAX_LEN

    def __init__(self, redis_client: redis.Redis):
        self._redis = redis_client

    async def publish_execution_request(self, request: ExecutionRequestMessage) -> str:
        message_id = await self._redis.xadd(
            self.EXECUTION_STREAM,
            {
                "execution_id": request.execution_id,
                "workflow_id": request.workflow_id,
                "tenant_id": request.tenant_id,
                "contact_id": request.contact_id,
                "conversation_id": request.conversation_id,
                "trigger_data": json.dumps(request.trigger_data),
            },
            maxlen=self.MAX_LEN,
            approximate=True,
        )
        return message_id
