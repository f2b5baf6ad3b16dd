"""Core constants used across toolbox modules.

This module centralizes names, messages, and labels.
Keeping values here avoids magic literals in command wiring.
"""

from __future__ import annotations

PROGRAM_NAME = "toolbox"
TOOLBOX_VERSION = "0.1.0"
LOG_LEVELS = ("debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL = "warning"
JSON_PRETTY_INDENT = 2
TEXT_ENCODING = "utf-8"
NO_INPUT_NOTICE = "nothing; to do here!"
NO_INPUT_SOURCE_MESSAGE = (
    "Not input source found. You can either pipe the input or specify a file or plaintext"
)
SUPPORTED_HASH_ALGORITHMS = ("md5", "sha1", "sha256", "sha512", "blake3")
HTML_MINIFY_LABEL = "Minify HTML"
JSON_MINIFY_LABEL = "Minify JSON"
JSON_UNMINIFY_LABEL = "Unminify JSON"
BASE64_ENCODE_LABEL = "Base64 Encoding"
BASE64_DECODE_LABEL = "Base64 Decoding"
BLAKE3_HASH_LABEL = "Blake3 Hash"
