"""
user_created.handler — User-created webhook Lambda.

Triggered by the DynamoDB Stream on the users table (view type NEW_IMAGE).
For every INSERT, forwards the new user record to HostedHooks as a
"user.created" message. MODIFY and REMOVE records are ignored.

Delivery failures are logged by hostedhooks and never fail the invocation,
so the stream never retries a batch because of HostedHooks.
"""

from __future__ import annotations

import os
from typing import Any

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.data_classes import DynamoDBStreamEvent, event_source
from aws_lambda_powertools.utilities.data_classes.dynamo_db_stream_event import (
    DynamoDBRecordEventName,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from hostedhooks import USER_CREATED, HostedHooksNotifier, NotifierConfig

logger = Logger(service="user-created")
tracer = Tracer()

# Key attribute of the users table
USER_ID_ATTRIBUTE = os.environ.get("USER_ID_ATTRIBUTE", "userId")


def notify_user_created(user: Any, user_id: Any, notifier: HostedHooksNotifier) -> None:
    """Forward one created user record. The delivery result is discarded."""
    logger.info("User created", extra={"user": user})
    logger.info("User id", extra={"user_id": user_id})
    notifier.notify(USER_CREATED, user)


@logger.inject_lambda_context
@tracer.capture_lambda_handler
@event_source(data_class=DynamoDBStreamEvent)
def handler(event: DynamoDBStreamEvent, context: LambdaContext) -> None:
    """DynamoDB Stream entry point."""
    # Read per invocation so the URL tracks the current APP_UUID
    notifier = HostedHooksNotifier(NotifierConfig.from_env())

    for record in event.records:
        if record.event_name != DynamoDBRecordEventName.INSERT:
            logger.debug("Skipping non-insert record", extra={"event_id": record.event_id})
            continue

        stream_record = record.dynamodb
        if stream_record is None:
            logger.debug("Skipping record without stream data", extra={"event_id": record.event_id})
            continue

        keys = stream_record.keys or {}
        notify_user_created(stream_record.new_image, keys.get(USER_ID_ATTRIBUTE), notifier)
