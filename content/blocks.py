"""
Block type registry.

A block type is described by a ``block.json`` file shipped with the app that
provides it. The registry maps the block name from that file to the
callable that renders it.
"""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from core.exceptions import BlockRegistrationError, UnknownBlockError

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Mapping[str, Any], int], str]


@dataclass(frozen=True)
class BlockType:
    name: str
    title: str
    render_callback: RenderCallback
    attributes: dict[str, Any] = field(default_factory=dict)


_block_types: dict[str, BlockType] = {}


def register_block_type_from_metadata(
    directory: str | Path, render_callback: RenderCallback
) -> BlockType:
    """
    Register a block type described by ``<directory>/block.json``.

    Args:
        directory: Directory holding block.json
        render_callback: Callable taking (attributes, item_id) and returning HTML

    Returns:
        The registered BlockType

    Raises:
        BlockRegistrationError: If block.json is missing, malformed, has no
            name, or the name is already registered
    """
    metadata_path = Path(directory) / "block.json"
    try:
        metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise BlockRegistrationError(f"Block metadata not found: {metadata_path}") from e
    except json.JSONDecodeError as e:
        raise BlockRegistrationError(f"Invalid block metadata in {metadata_path}: {e}") from e

    name = metadata.get("name")
    if not name:
        raise BlockRegistrationError(f"Block metadata has no name: {metadata_path}")
    if name in _block_types:
        raise BlockRegistrationError(f"Block type already registered: {name}")

    block_type = BlockType(
        name=name,
        title=metadata.get("title", name),
        render_callback=render_callback,
        attributes=metadata.get("attributes", {}),
    )
    _block_types[name] = block_type
    logger.info(f"Registered block type {name}")
    return block_type


def unregister_block_type(name: str) -> None:
    _block_types.pop(name, None)


def get_block_type(name: str) -> BlockType | None:
    return _block_types.get(name)


def render_block(name: str, attributes: Mapping[str, Any] | None, item_id: int) -> str:
    """
    Render a registered block for the item being displayed.

    Raises:
        UnknownBlockError: If no block type is registered under ``name``
    """
    block_type = _block_types.get(name)
    if block_type is None:
        raise UnknownBlockError(f"Unknown block type: {name}")
    return block_type.render_callback(attributes or {}, item_id)
