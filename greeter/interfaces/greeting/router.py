"""
FastAPI router for the greeting bounded context.

Binds the /hello route to SayHelloUseCase through three steps:
decode the raw body, dispatch to the use case, encode the result.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from greeter.application.greeting.dtos import GreetRequest, GreetResponse
from greeter.application.greeting.say_hello import SayHelloUseCase
from greeter.core.config import settings
from greeter.interfaces.greeting.dependencies import get_say_hello_use_case
from greeter.interfaces.greeting.schemas import (
    ErrorResponse,
    HelloRequest,
    HelloResponse,
)
from greeter.shared.errors import DecodeError, PayloadTooLargeError

router = APIRouter(tags=["greeting"])


async def read_limited_body(request: Request, max_size: int) -> bytes:
    """Read the request body, stopping as soon as it exceeds ``max_size``.

    A declared Content-Length over the limit is rejected before any of
    the body is read.

    Raises:
        PayloadTooLargeError: If the body exceeds ``max_size``.
    """
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_size:
        raise PayloadTooLargeError(int(declared), max_size)

    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > max_size:
            raise PayloadTooLargeError(size, max_size)
        chunks.append(chunk)
    return b"".join(chunks)


def decode_hello_request(raw: bytes) -> GreetRequest:
    """Decode a raw JSON body into a GreetRequest.

    Raises:
        DecodeError: If the body is not a JSON object of the expected shape.
    """
    try:
        body = HelloRequest.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"{exc.error_count()} validation error(s)") from exc
    return GreetRequest(name=body.name or "")


def encode_hello_response(response: GreetResponse) -> HelloResponse:
    """Encode a GreetResponse into the wire schema."""
    return HelloResponse(
        greeting=response.greeting,
        err=None if response.error is None else str(response.error),
    )


@router.post(
    "/hello",
    response_model=HelloResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": HelloRequest.model_json_schema()}
            },
        }
    },
    summary="Say hello",
    description="Greet the caller by their title-cased name.",
)
async def hello(
    request: Request,
    use_case: SayHelloUseCase = Depends(get_say_hello_use_case),
) -> HelloResponse:
    """Decode the body, greet the caller and encode the result."""
    raw = await read_limited_body(request, settings.max_request_size_bytes)
    greet_request = decode_hello_request(raw)
    result = use_case.execute(greet_request)
    if settings.strict_domain_errors and result.error is not None:
        raise result.error
    return encode_hello_response(result)
