"""Tool family and leaf action wiring for the toolbox CLI.

Each tool family is one argparse subcommand with nested action
subcommands. Every leaf takes the same ``[INPUT] [--raw]`` arguments and
is bound to exactly one transform through an :class:`ActionSpec`.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from functools import partial
from typing import Any, Mapping

from core.action_invoker import invoke_action
from core.constants import (
    BASE64_DECODE_LABEL,
    BASE64_ENCODE_LABEL,
    BLAKE3_HASH_LABEL,
    HTML_MINIFY_LABEL,
    JSON_MINIFY_LABEL,
    JSON_UNMINIFY_LABEL,
)
from core.errors import ToolboxUsageError
from core.types import ActionSpec, InputSource
from transforms.base64_codec import decode_base64, encode_base64
from transforms.hashing import hash_text, supported_hash_algorithms
from transforms.html_minify import minify_html
from transforms.json_format import minify_json, unminify_json


@dataclass(frozen=True)
class ToolFamily:
    """Internal command-tree node grouping leaf actions."""

    name: str
    help: str
    actions: Mapping[str, ActionSpec]


def _family(name: str, help_text: str, *actions: ActionSpec) -> ToolFamily:
    return ToolFamily(name=name, help=help_text, actions={spec.action: spec for spec in actions})


def _hash_action(algorithm: str) -> ActionSpec:
    label = BLAKE3_HASH_LABEL if algorithm == "blake3" else f"{algorithm.upper()} Hash"
    return ActionSpec(
        family="hash",
        action=algorithm,
        label=label,
        transform=partial(hash_text, algorithm),
        help=f"Print the {label.removesuffix(' Hash')} hex digest",
    )


TOOL_FAMILIES: Mapping[str, ToolFamily] = {
    family.name: family
    for family in (
        _family(
            "html",
            "Minify html",
            ActionSpec("html", "minify", HTML_MINIFY_LABEL, minify_html, "Minify html"),
        ),
        _family(
            "json",
            "Minify or unminify json",
            ActionSpec("json", "minify", JSON_MINIFY_LABEL, minify_json, "Minify json"),
            ActionSpec(
                "json", "unminify", JSON_UNMINIFY_LABEL, unminify_json, "Pretty-print json"
            ),
        ),
        _family(
            "b64",
            "Base64 Encoding and Decoding",
            ActionSpec("b64", "encode", BASE64_ENCODE_LABEL, encode_base64, "Encode to base64"),
            ActionSpec("b64", "decode", BASE64_DECODE_LABEL, decode_base64, "Decode from base64"),
        ),
        _family(
            "hash",
            "Popular hash functions (MD5, SHA1, SHA256, SHA512, Blake3)",
            *(_hash_action(algorithm) for algorithm in supported_hash_algorithms()),
        ),
    )
}


def add_tool_commands(subparsers: Any) -> None:
    """Register every tool family and its leaf actions."""
    for family in TOOL_FAMILIES.values():
        family_parser = subparsers.add_parser(family.name, help=family.help)
        action_parsers = family_parser.add_subparsers(dest="action", required=True)
        for spec in family.actions.values():
            leaf_parser = action_parsers.add_parser(spec.action, help=spec.help)
            _add_input_source_arguments(leaf_parser)


def lookup_action(family: str, action: str) -> ActionSpec:
    """Return the leaf action for a family/action pair.

    Args:
        family: Tool family name.
        action: Action name within the family.

    Returns:
        Matching action spec.

    Raises:
        ToolboxUsageError: If the pair names no action.
    """
    tool_family = TOOL_FAMILIES.get(family)
    if tool_family is None or action not in tool_family.actions:
        raise ToolboxUsageError(f"Unknown command: {family} {action}")
    return tool_family.actions[action]


def run_tool_command(args: argparse.Namespace) -> int:
    """Run the leaf action selected by parsed CLI args."""
    spec = lookup_action(args.command, args.action)
    source = InputSource(value=args.input, raw=args.raw)
    return invoke_action(spec, source)


def _add_input_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        nargs="?",
        help="Filename to read from or raw input (must specify --raw)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Treat INPUT as literal text instead of a file path",
    )
