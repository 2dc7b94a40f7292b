"""
Orders Handler - Lambda function for the orders API.

This module implements the handler layer for order operations. It reads the
API Gateway REST proxy event, dispatches on the HTTP method and turns the
outcome of the service layer into a proxy response:

- POST                       -> create (upsert) an order
- GET /orders/{orderId}      -> fetch every order stored under orderId
- GET /orders                -> fetch every order
- anything else              -> 405
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from service.dal import get_dal_handler
from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.errors import (
    InvalidRequestError,
    StoreError,
    StoreInitializationError,
    log_error_metrics,
)
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.responses import TEXT_CONTENT_TYPE, create_api_response, message_response
from service.logic.order_service import OrderService
from service.models.order import Order
from service.models.output import OrderListOutput

ORDER_ID_PATH_PARAMETER = 'orderId'

ORDER_CREATED_MESSAGE = 'Order created successfully'
INVALID_BODY_MESSAGE = 'Invalid request body'
CREATE_FAILED_MESSAGE = 'Failed to create order'
ORDER_NOT_FOUND_MESSAGE = 'Order not found'
FETCH_ORDER_FAILED_MESSAGE = 'Failed to fetch order'
FETCH_ORDERS_FAILED_MESSAGE = 'Failed to fetch orders'
METHOD_NOT_ALLOWED_MESSAGE = 'Method not allowed'

# Built on first use and reused by every invocation on this process
_order_service: Optional[OrderService] = None


def get_order_service() -> OrderService:
    """
    Get or create the process-wide order service.

    Raises:
        StoreInitializationError: If the DynamoDB client cannot be created
    """
    global _order_service

    if _order_service is None:
        env_vars = get_handler_env_vars()
        orders_dal = get_dal_handler(
            table_name=env_vars.TABLE_NAME,
            endpoint_url=env_vars.DYNAMODB_ENDPOINT,
            region_name=env_vars.AWS_REGION,
        )
        _order_service = OrderService(orders_dal=orders_dal)
        logger.info("Order service initialized", extra={"table_name": env_vars.TABLE_NAME})

    return _order_service


def parse_order(event: APIGatewayProxyEvent) -> Order:
    """
    Parse the request body into an Order.

    Raises:
        InvalidRequestError: If the body cannot be decoded or is not a JSON object of the expected shape
    """
    try:
        body = event.decoded_body
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning("Request body could not be decoded", extra={
            "is_base64_encoded": event.is_base64_encoded,
            "error": str(e),
        })
        raise InvalidRequestError(f"Undecodable request body: {e}") from e

    try:
        return Order.model_validate_json(body or '')
    except ValidationError as e:
        logger.warning("Request body rejected", extra={
            "validation_errors": e.errors(include_url=False, include_input=False),
            "error_count": e.error_count(),
        })
        raise InvalidRequestError(f"Invalid order body: {e.error_count()} validation error(s)") from e


def orders_response(orders) -> Dict[str, Any]:
    return create_api_response(
        status_code=200,
        body=OrderListOutput.dump_json(orders, by_alias=True).decode(),
    )


@tracer.capture_method
def create_order(event: APIGatewayProxyEvent, order_service: OrderService) -> Dict[str, Any]:
    """
    Create or replace an order from the request body.

    Returns:
        201 on success, 400 for a malformed body, 500 when the write fails
    """
    try:
        order = parse_order(event)
    except InvalidRequestError as e:
        log_error_metrics(e)
        return message_response(400, INVALID_BODY_MESSAGE)

    try:
        order = order_service.create_order(order)
    except StoreError as e:
        log_error_metrics(e)
        return message_response(500, CREATE_FAILED_MESSAGE)

    logger.info("Order created successfully", extra={"order_id": order.order_id})
    return message_response(201, ORDER_CREATED_MESSAGE)


@tracer.capture_method
def get_order(order_id: str, order_service: OrderService) -> Dict[str, Any]:
    """
    Fetch every order stored under order_id.

    Returns:
        200 with a JSON array, 404 when nothing matches, 500 when the query fails
    """
    logger.info("Get order request received", extra={"order_id": order_id})

    try:
        orders = order_service.get_orders_by_id(order_id)
    except StoreError as e:
        log_error_metrics(e)
        return message_response(500, FETCH_ORDER_FAILED_MESSAGE)

    if not orders:
        logger.info("Order not found", extra={"order_id": order_id})
        metrics.add_metric(name="OrderNotFound", unit=MetricUnit.Count, value=1)
        return message_response(404, ORDER_NOT_FOUND_MESSAGE)

    return orders_response(orders)


@tracer.capture_method
def list_orders(order_service: OrderService) -> Dict[str, Any]:
    """
    Fetch every order in the table.

    Returns:
        200 with a JSON array, 500 when the scan fails
    """
    logger.info("List orders request received")

    try:
        orders = order_service.list_orders()
    except StoreError as e:
        log_error_metrics(e)
        return message_response(500, FETCH_ORDERS_FAILED_MESSAGE)

    return orders_response(orders)


def method_not_allowed(http_method: Optional[str]) -> Dict[str, Any]:
    logger.info("Method not allowed", extra={"http_method": http_method})
    metrics.add_metric(name="MethodNotAllowed", unit=MetricUnit.Count, value=1)
    return create_api_response(
        status_code=405,
        body=METHOD_NOT_ALLOWED_MESSAGE,
        content_type=TEXT_CONTENT_TYPE,
    )


def handle_request(event: APIGatewayProxyEvent, order_service: OrderService) -> Dict[str, Any]:
    """
    Dispatch one request to the matching order operation.

    Args:
        event: API Gateway REST proxy event
        order_service: Service used for every store interaction

    Returns:
        API Gateway proxy response
    """
    http_method = event.http_method

    if http_method == 'POST':
        return create_order(event, order_service)

    if http_method == 'GET':
        order_id = (event.path_parameters or {}).get(ORDER_ID_PATH_PARAMETER)
        if order_id:
            return get_order(order_id, order_service)
        return list_orders(order_service)

    return method_not_allowed(http_method)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response

    Raises:
        StoreInitializationError: If the DynamoDB client cannot be created
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("http_method", event.http_method or "unknown")

    try:
        order_service = get_order_service()
    except StoreInitializationError as e:
        log_error_metrics(e)
        raise

    try:
        return handle_request(event, order_service)
    except Exception as e:
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)
        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})
        return message_response(500, "Internal server error")
