"""Public SDK surface for toolbox.

This module provides a stable import path for library users.
It re-exports input resolution, action invocation, and transforms.
"""

from __future__ import annotations

from cli.command_tree import lookup_action
from core.action_invoker import invoke_action
from core.config import ToolboxConfig
from core.input_resolver import resolve_input
from core.types import ActionSpec, InputSource
from transforms.base64_codec import decode_base64, encode_base64
from transforms.hashing import hash_text, supported_hash_algorithms
from transforms.html_minify import minify_html
from transforms.json_format import minify_json, unminify_json
from transforms.uuid_generator import generate_uuid

__all__ = [
    "ActionSpec",
    "InputSource",
    "ToolboxConfig",
    "decode_base64",
    "encode_base64",
    "generate_uuid",
    "hash_text",
    "invoke_action",
    "lookup_action",
    "minify_html",
    "minify_json",
    "resolve_input",
    "supported_hash_algorithms",
    "unminify_json",
]
