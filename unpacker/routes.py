"""
Flask application and unpacker HTTP endpoints.

Thin adapter handing request bodies to the fallback decoder.
"""

import logging
from functools import lru_cache
from flask import Flask, abort, jsonify, make_response, request

from .config import config
from .decoder import FallbackDecoder
from .errors import NoMatchingStrategyError, ReadError
from .methods import resolve_methods
from .validation import compute_sha256, validate_methods_param

logger = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = config.MAX_CONTENT_LENGTH


@lru_cache(maxsize=config.CACHE_SIZE)
def get_decoder(names: tuple[str, ...]) -> FallbackDecoder:
    """
    Build (or reuse) a decoder for a method order.

    Decoders are stateless, so one instance per distinct order is shared
    across requests.
    """
    logger.debug(f"Creating decoder for methods: {list(names)}")
    return FallbackDecoder(resolve_methods(names))


# -------------------------------
# Unpacker Endpoints
# -------------------------------


@app.route("/v1/")
def v1_root():
    """
    API version check endpoint.

    Returns:
        JSON with the configured method order, status 200

    Headers:
        Unpacker-API-Version: v1
    """
    logger.info("Unpacker v1 API root accessed")
    resp = jsonify({"methods": list(config.methods)})
    resp.headers["Unpacker-API-Version"] = "v1"
    return resp


@app.route("/v1/decode", methods=["POST"])
def decode():
    """
    Decode the request body with the fallback decoder.

    Query Parameters:
        methods: Optional comma separated method order overriding DECODE_METHODS
            for this request (e.g., "tar,identity")

    Response Headers:
        Content-Type: application/octet-stream
        Content-Length: Size of the decoded payload
        Unpacker-Method: Name of the method that decoded the content
        Unpacker-Content-Digest: SHA256 digest of the decoded payload

    Raises:
        400: Invalid methods parameter or unreadable body
        413: Body larger than MAX_CONTENT_LENGTH
        415: No configured method could decode the body
    """
    methods_param = request.args.get("methods")
    if methods_param is not None:
        names = validate_methods_param(methods_param)
    else:
        names = config.methods

    logger.info(f"Decode requested: content_length={request.content_length}, methods={list(names)}")

    decoder = get_decoder(names)
    try:
        method, payload = decoder.decode_with_method(request.stream)
    except ReadError as e:
        logger.warning(f"Failed to read request body: {e}")
        abort(400, "Unable to read request body")
    except NoMatchingStrategyError as e:
        logger.warning(f"Unsupported content: {e}")
        abort(415, f"None of the methods could decode the content: {', '.join(e.methods)}")

    digest = compute_sha256(payload)
    logger.debug(f"Decoded payload: method={method}, digest={digest}, size={len(payload)} bytes")

    resp = make_response(payload)
    resp.headers["Content-Type"] = "application/octet-stream"
    resp.headers["Content-Length"] = len(payload)
    resp.headers["Unpacker-Method"] = method
    resp.headers["Unpacker-Content-Digest"] = digest

    logger.info(f"Decoded payload sent: method={method}, digest={digest}")
    return resp
