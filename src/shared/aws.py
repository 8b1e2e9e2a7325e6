import os

import boto3

DEFAULT_REGION = "us-east-1"

_clients: dict = {}


def get_aws_client(service_name: str):
    """
    Returns a boto3 client for the given service, cached per process.

    Region comes from AWS_REGION (set by the Lambda runtime), falling back to us-east-1.
    """
    client = _clients.get(service_name)
    if client is None:
        region = os.environ.get("AWS_REGION") or DEFAULT_REGION
        client = boto3.client(service_name, region_name=region)
        _clients[service_name] = client
    return client


def get_s3_client():
    return get_aws_client("s3")


def get_dynamodb_client():
    return get_aws_client("dynamodb")
