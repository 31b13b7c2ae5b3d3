"""JSON query endpoint."""

import json

from fastapi import APIRouter, Depends, Query, Response
from loguru import logger

from ..core.content import load_json_document
from ..core.dependencies import get_resolver
from ..core.errors import BadRequestError, InternalError
from ..core.jsonpath import evaluate
from ..core.resolver import PathResolver

router = APIRouter()


@router.get("/")
@router.get("", include_in_schema=False)
def query_json(
    file: str = "",
    path: str = "",
    directory: str = Query("", alias="dir"),
    resolver: PathResolver = Depends(get_resolver),
) -> Response:
    """Evaluate a dotted/bracket path against a JSON file.

    Args:
        file: JSON file name or path relative to the root
        path: Path such as ``servers[0].name``
        directory: Optional directory the file is expected in

    Returns:
        The selected JSON value
    """
    logger.info(f"Querying JSON file: {file} with path: {path} in directory: '{directory}'")
    if not file or not path:
        logger.error("Missing file or path parameter")
        raise BadRequestError("Missing file or path parameter")

    file_path = resolver.resolve(file, directory)
    document = load_json_document(file_path)
    result = evaluate(document, path)

    try:
        body = json.dumps(result, ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        logger.error(f"Error encoding result to JSON: {e}")
        raise InternalError(f"Error encoding result: {e}")

    logger.info(f"Query successful, sending result ({len(body)} chars)")
    return Response(content=body, media_type="application/json")
