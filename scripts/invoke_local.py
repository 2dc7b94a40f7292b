#!/usr/bin/env python3
"""
Invoke the orders handler locally with a canned API Gateway event.

Point DYNAMODB_ENDPOINT at DynamoDB Local (or leave it unset to use the
table in your default AWS account and region):

    DYNAMODB_ENDPOINT=http://localhost:8000 python scripts/invoke_local.py get-all
    python scripts/invoke_local.py get --order-id 20221
    python scripts/invoke_local.py create --order-id 20221 --customer-name Siri --product "Lunch Box"
"""
import argparse
import json
import uuid
from types import SimpleNamespace


def build_event(args: argparse.Namespace) -> dict:
    """Build an API Gateway REST proxy event for the chosen operation."""
    event = {
        "resource": "/orders",
        "path": "/orders",
        "httpMethod": "GET",
        "headers": {"Content-Type": "application/json"},
        "pathParameters": None,
        "queryStringParameters": None,
        "requestContext": {"requestId": str(uuid.uuid4())},
        "body": None,
        "isBase64Encoded": False,
    }

    if args.operation == "get":
        event["resource"] = "/orders/{orderId}"
        event["path"] = f"/orders/{args.order_id}"
        event["pathParameters"] = {"orderId": args.order_id}
    elif args.operation == "create":
        event["httpMethod"] = "POST"
        event["body"] = json.dumps({
            "orderId": args.order_id,
            "customerName": args.customer_name,
            "product": args.product,
            "quantity": args.quantity,
            "status": args.status,
        })

    return event


def build_context() -> SimpleNamespace:
    """Minimal stand-in for the Lambda context object."""
    return SimpleNamespace(
        function_name="orders-local",
        function_version="$LATEST",
        invoked_function_arn="arn:aws:lambda:local:000000000000:function:orders-local",
        memory_limit_in_mb=128,
        aws_request_id=str(uuid.uuid4()),
        log_group_name="/aws/lambda/orders-local",
        log_stream_name="local",
        get_remaining_time_in_millis=lambda: 30000,
    )


def main():
    parser = argparse.ArgumentParser(description="Invoke the orders handler locally")
    parser.add_argument("operation", choices=["get", "get-all", "create"])
    parser.add_argument("--order-id", default=str(uuid.uuid4()))
    parser.add_argument("--customer-name", default="Siri")
    parser.add_argument("--product", default="Lunch Box")
    parser.add_argument("--quantity", type=int, default=1)
    parser.add_argument("--status", default="CREATED")
    args = parser.parse_args()

    # Imported late so environment variables set by the caller apply
    from service.handlers.orders_handler import lambda_handler

    response = lambda_handler(build_event(args), build_context())

    print("STATUS:", response["statusCode"])
    print("BODY:", response["body"])


if __name__ == "__main__":
    main()
