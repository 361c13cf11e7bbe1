"""Shared AWS helpers for service clients."""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config


def create_boto3_client(
    service_name: str,
    *,
    region_name: str,
    aws_access_key_id: str | None = None,
    aws_secret_access_key: str | None = None,
    timeout_seconds: float | None = None,
) -> boto3.client:
    """Instantiate a boto3 client for a single-attempt, time-bounded call."""

    client_kwargs: dict[str, Any] = {"region_name": region_name}
    if aws_access_key_id and aws_secret_access_key:
        client_kwargs["aws_access_key_id"] = aws_access_key_id
        client_kwargs["aws_secret_access_key"] = aws_secret_access_key
    if timeout_seconds is not None:
        # botocore counts the first attempt, so 1 means no retries.
        client_kwargs["config"] = Config(
            connect_timeout=timeout_seconds,
            read_timeout=timeout_seconds,
            retries={"max_attempts": 1, "mode": "standard"},
        )
    return boto3.client(service_name, **client_kwargs)


__all__ = ["create_boto3_client"]
