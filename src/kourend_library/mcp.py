"""MCP server for the Kourend library solver.

Exposes bookcase observations and book lookups through Model Context
Protocol tools.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from kourend_library.books import Book, LibraryCustomer
from kourend_library.engine import Library
from kourend_library.layout import WorldPoint
from kourend_library.queries import (
    bookcase_to_dict,
    customer_summary,
    find_book,
    library_summary,
)

logger = logging.getLogger(__name__)

# Solver instance shared by all tool calls (created on first use)
_library: Library | None = None


def get_library() -> Library:
    """Get or initialize the library solver."""
    global _library
    if _library is None:
        _library = Library()
    return _library


def parse_book(value: Any) -> Book | None:
    """Accept a member name (``"SOUL_JOURNEY"``), an item id, or null for empty.

    Raises:
        ValueError: if the value names no book
    """
    if value is None:
        return None
    if isinstance(value, int):
        book = Book.by_item_id(value)
    else:
        book = Book.by_name(str(value))
    if book is None:
        raise ValueError(f"Unknown book: {value}")
    return book


def _location(arguments: dict[str, Any]) -> WorldPoint:
    return WorldPoint(int(arguments["x"]), int(arguments["y"]), int(arguments["plane"]))


def _json(result: Any) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


# Initialize server
server = Server("kourend_library")


# -------------------------------------------------------------------------
# Tool Definitions
# -------------------------------------------------------------------------

_LOCATION_PROPERTIES = {
    "x": {"type": "integer", "description": "Tile x coordinate"},
    "y": {"type": "integer", "description": "Tile y coordinate"},
    "plane": {"type": "integer", "description": "Floor (0 ground, 1 middle, 2 top)"},
}

_BOOK_PROPERTY = {
    "type": ["string", "integer", "null"],
    "description": "Book name or item id; null when the bookcase is empty",
}

TOOLS = [
    Tool(
        name="mark_bookcase",
        description="Record what was found when searching a bookcase",
        inputSchema={
            "type": "object",
            "properties": {**_LOCATION_PROPERTIES, "book": _BOOK_PROPERTY},
            "required": ["x", "y", "plane", "book"],
        },
    ),
    Tool(
        name="reset_library",
        description="Forget all observations, e.g. after the library reshuffles",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="locate_book",
        description="List the bookcases that hold or may hold a book",
        inputSchema={
            "type": "object",
            "properties": {"book": {**_BOOK_PROPERTY, "type": ["string", "integer"]}},
            "required": ["book"],
        },
    ),
    Tool(
        name="get_bookcase",
        description="Show what is known about one bookcase",
        inputSchema={
            "type": "object",
            "properties": _LOCATION_PROPERTIES,
            "required": ["x", "y", "plane"],
        },
    ),
    Tool(
        name="library_state",
        description="Show solver progress and dark manuscript availability",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="set_customer",
        description="Record which customer asked for which book",
        inputSchema={
            "type": "object",
            "properties": {
                "npc_id": {
                    "type": "integer",
                    "enum": [customer.npc_id for customer in LibraryCustomer],
                    "description": "NPC id of the customer",
                },
                "book": {**_BOOK_PROPERTY, "type": ["string", "integer"]},
            },
            "required": ["npc_id", "book"],
        },
    ),
    Tool(
        name="customer_book_locations",
        description="List where the requested book may be found",
        inputSchema={"type": "object", "properties": {}},
    ),
]


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return TOOLS


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    library = get_library()

    try:
        # Route to appropriate solver method
        if name == "mark_bookcase":
            location = _location(arguments)
            bookcase = library.get_bookcase(location)
            if bookcase is None:
                return [
                    TextContent(
                        type="text",
                        text=f"Not a library bookcase: {location}; ignored",
                    )
                ]
            library.mark(location, parse_book(arguments.get("book")))
            return _json(
                {
                    "bookcase": bookcase_to_dict(bookcase),
                    "library": library_summary(library),
                }
            )

        elif name == "reset_library":
            library.reset()
            return [TextContent(type="text", text="Library reset")]

        elif name == "locate_book":
            book = parse_book(arguments["book"])
            if book is None:
                raise ValueError("A book is required")
            return _json(find_book(library, book))

        elif name == "get_bookcase":
            location = _location(arguments)
            bookcase = library.get_bookcase(location)
            if bookcase is None:
                return [
                    TextContent(type="text", text=f"Not a library bookcase: {location}")
                ]
            return _json(bookcase_to_dict(bookcase))

        elif name == "library_state":
            return _json(library_summary(library))

        elif name == "set_customer":
            customer = LibraryCustomer.by_id(int(arguments["npc_id"]))
            if customer is None:
                raise ValueError(f"Unknown customer: {arguments['npc_id']}")
            book = parse_book(arguments["book"])
            library.set_customer(customer, book)
            return [
                TextContent(
                    type="text",
                    text=f"{customer.display_name} wants {book.short_name if book else 'nothing'}",
                )
            ]

        elif name == "customer_book_locations":
            result = customer_summary(library)
            if result is None:
                return [TextContent(type="text", text="No book has been requested")]
            return _json(result)

        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

    except Exception as e:
        logger.warning("Tool %s failed: %s", name, e)
        return [TextContent(type="text", text=f"Error: {str(e)}")]


# -------------------------------------------------------------------------
# Main Entry Point
# -------------------------------------------------------------------------


async def main():
    """Run the MCP server."""
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=os.getenv("KOUREND_LIBRARY_LOG_LEVEL", "WARNING").upper(),
        stream=sys.stderr,
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
