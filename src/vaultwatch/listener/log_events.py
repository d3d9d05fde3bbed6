"""Extract Anchor event payloads from transaction log messages."""

import base64
import binascii
import logging
import re

logger = logging.getLogger(__name__)

PROGRAM_DATA_PREFIX = "Program data: "
_INVOKE_RE = re.compile(r"^Program (\w+) invoke \[\d+\]$")
_EXIT_RE = re.compile(r"^Program (\w+) (?:success|failed)")


def extract_program_data(log_messages: list[str], program_id: str) -> list[bytes]:
    """Return decoded ``Program data:`` payloads emitted by ``program_id`` itself.

    Tracks the invocation stack so data lines written by programs that the
    watched program calls (or that call it) are not attributed to it.
    """
    payloads: list[bytes] = []
    stack: list[str] = []

    for line in log_messages:
        if match := _INVOKE_RE.match(line):
            stack.append(match.group(1))
            continue
        if match := _EXIT_RE.match(line):
            if stack and stack[-1] == match.group(1):
                stack.pop()
            continue
        if not line.startswith(PROGRAM_DATA_PREFIX) or not stack or stack[-1] != program_id:
            continue

        encoded = line[len(PROGRAM_DATA_PREFIX):].strip()
        try:
            payloads.append(base64.b64decode(encoded, validate=True))
        except binascii.Error:
            logger.warning("Skipping malformed program data line: %s", encoded[:64])

    return payloads
