"""
API Gateway proxy response builders.
"""

from typing import Any, Dict

from service.models.output import MessageOutput

JSON_CONTENT_TYPE = 'application/json'
TEXT_CONTENT_TYPE = 'text/plain'


def create_api_response(status_code: int, body: str, content_type: str = JSON_CONTENT_TYPE) -> Dict[str, Any]:
    """Create an API Gateway proxy integration response."""
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': content_type},
        'body': body,
    }


def message_response(status_code: int, message: str) -> Dict[str, Any]:
    """Create a JSON response whose body is {"message": <message>}."""
    return create_api_response(
        status_code=status_code,
        body=MessageOutput(message=message).model_dump_json(),
    )
