"""Example of using the library solver through MCP.

This demonstrates how a game client plugin or assistant would report
bookcase checks and ask where a customer's book is.
"""

import asyncio
import json
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def run_example():
    """Run example MCP interactions."""
    # Connect to the MCP server
    server_params = StdioServerParameters(
        command="kourend-library-mcp",
        env={"KOUREND_LIBRARY_LOG_LEVEL": "INFO"},
    )

    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            # Initialize connection
            await session.initialize()

            # List available tools
            tools = await session.list_tools()
            print(f"Available tools: {[t.name for t in tools.tools]}")

            # A customer asks for a book
            print("\n=== Customer request ===")
            request = await session.call_tool(
                "set_customer",
                {"npc_id": 7047, "book": "TWILL_ACCORD"},
            )
            print(request.content[0].text)

            # Report a few bookcase checks
            print("\n=== Checking bookcases ===")
            checks = [
                (1626, 3795, 0, "RICKTORS_DIARY_7"),
                (1625, 3793, 0, None),
                (1615, 3788, 0, None),
                (1607, 3786, 0, None),
            ]
            for x, y, plane, book in checks:
                result = await session.call_tool(
                    "mark_bookcase",
                    {"x": x, "y": y, "plane": plane, "book": book},
                )
                data = json.loads(result.content[0].text)
                print(
                    f"  {data['bookcase']['description']}: {book or 'empty'} -> "
                    f"{data['library']['state']} "
                    f"({data['library']['available_sequences']} candidates)"
                )

            # Where should Villia's book be?
            print("\n=== Customer book locations ===")
            locations = await session.call_tool("customer_book_locations", {})
            data = json.loads(locations.content[0].text)
            for bookcase in data["locations"]:
                print(f"  - {bookcase['description']}")

            # Overall progress
            print("\n=== Library state ===")
            state = await session.call_tool("library_state", {})
            print(state.content[0].text)


if __name__ == "__main__":
    asyncio.run(run_example())
