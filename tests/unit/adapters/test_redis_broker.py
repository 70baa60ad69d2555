import json
from dataclasses import fields
from unittest.mock import AsyncMock

import pytest

from src.adapters.secondary.redis.redis_message_broker import RedisMessageBroker
from src.ports.secondary.message_broker import ExecutionRequestMessage


@pytest.mark.asyncio
async def test_publish_execution_request():
    mock_redis = AsyncMock()
    mock_redis.xadd.return_value = "1700000000000-0"
    broker = RedisMessageBroker(mock_redis)

    message_id = await broker.publish_execution_request(
        ExecutionRequestMessage(
            execution_id="e1",
            workflow_id="w1",
            tenant_id="acme",
            contact_id="c1",
            conversation_id="conv1",
            trigger_data={"text": "price"},
        )
    )

    assert message_id == "1700000000000-0"
    mock_redis.xadd.assert_called_once()
    args, kwargs = mock_redis.xadd.call_args
    assert args[0] == RedisMessageBroker.EXECUTION_STREAM
    assert args[1]["execution_id"] == "e1"
    assert args[1]["tenant_id"] == "acme"
    assert json.loads(args[1]["trigger_data"]) == {"text": "price"}
    assert kwargs == {"maxlen": RedisMessageBroker.MAX_LEN, "approximate": True}


@pytest.mark.asyncio
async def test_every_message_field_reaches_the_stream():
    mock_redis = AsyncMock()
    broker = RedisMessageBroker(mock_redis)

    await broker.publish_execution_request(
        ExecutionRequestMessage(
            execution_id="e1",
            workflow_id="w1",
            tenant_id="acme",
            contact_id="c1",
            conversation_id="conv1",
        )
    )

    args, _ = mock_redis.xadd.call_args
    assert set(args[1]) == {field.name for field in fields(ExecutionRequestMessage)}
