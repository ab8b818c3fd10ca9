#!/usr/bin/env python3
"""
Cat Database MCP Test Client

Starts the server over stdio and walks through every tool, then checks that
bad calls come back as JSON-RPC errors with the right codes. Useful as a
smoke test after changing the server and as a minimal example of an MCP
client.

Usage:
    python scripts/test_client.py
    python scripts/test_client.py --server path/to/server.py
"""

import argparse
import asyncio
import sys
from pathlib import Path

from fastmcp import Client
from mcp import types
from mcp.shared.exceptions import McpError

DEFAULT_SERVER = Path(__file__).parent.parent / "src" / "cat_database_mcp" / "server.py"


class Colors:
    """ANSI color codes for terminal output"""

    HEADER = "\033[95m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    END = "\033[0m"


class CatDatabaseClient:
    """Smoke-test client for the Cat Database MCP Server"""

    def __init__(self, server_path: Path = DEFAULT_SERVER):
        self.server_path = Path(server_path).resolve()
        if not self.server_path.exists():
            print(f"{Colors.RED}Error: Server file not found at {self.server_path}{Colors.END}")
            sys.exit(1)

        self.client = Client(str(self.server_path))
        self.failures = 0

    async def show_server_info(self):
        init_result = self.client.initialize_result
        print(f"\n{Colors.CYAN}Server Information:{Colors.END}")
        print(f"  Name: {init_result.serverInfo.name}")
        print(f"  Version: {init_result.serverInfo.version}")
        print(f"  Protocol: {init_result.protocolVersion}")
        if init_result.instructions:
            print(f"  Instructions: {init_result.instructions}")

    async def list_tools(self):
        tools = await self.client.list_tools()
        print(f"\n{Colors.CYAN}Available Tools ({len(tools)}):{Colors.END}")
        for tool in tools:
            params = ", ".join(tool.inputSchema.get("properties", {})) or "no parameters"
            print(f"  {Colors.BOLD}{tool.name}{Colors.END} ({params})")
            print(f"    {tool.description}")

    async def call(self, name: str, arguments: dict):
        print(f"\n{Colors.YELLOW}> {name} {arguments}{Colors.END}")
        result = await self.client.call_tool_mcp(name, arguments)
        for block in result.content:
            print(block.text)

    async def expect_error(self, name: str, arguments: dict, code: int):
        print(f"\n{Colors.YELLOW}> {name} {arguments} (expecting error {code}){Colors.END}")
        try:
            await self.client.call_tool_mcp(name, arguments)
        except McpError as e:
            if e.error.code == code:
                print(f"{Colors.GREEN}✓ Error correctly caught: {e.error.message}{Colors.END}")
            else:
                self.failures += 1
                print(f"{Colors.RED}✗ Wrong error code {e.error.code}: {e}{Colors.END}")
            return
        self.failures += 1
        print(f"{Colors.RED}✗ Call succeeded but should have failed{Colors.END}")

    async def run(self) -> int:
        print(f"{Colors.YELLOW}Connecting to Cat Database MCP Server...{Colors.END}")
        async with self.client:
            await self.client.ping()
            print(f"{Colors.GREEN}✓ Connected, server is responsive{Colors.END}")

            await self.show_server_info()
            await self.list_tools()

            print(f"\n{Colors.HEADER}--- Tool calls ---{Colors.END}")
            await self.call("list_all_cats", {})
            await self.call("get_cat_by_id", {"id": 1})
            await self.call("get_cat_by_id", {"id": 999})
            await self.call("search_by_breed", {"breed": "Persian"})
            await self.call("search_by_breed", {"breed": "Nonexistent"})
            await self.call("get_indoor_cats", {})

            print(f"\n{Colors.HEADER}--- Error handling ---{Colors.END}")
            await self.expect_error("delete_cat", {"id": 1}, types.METHOD_NOT_FOUND)
            await self.expect_error("get_cat_by_id", {}, types.INVALID_PARAMS)
            await self.expect_error("get_cat_by_id", {"id": "1"}, types.INVALID_PARAMS)
            await self.expect_error("search_by_breed", {"breed": 42}, types.INVALID_PARAMS)

        if self.failures:
            print(f"\n{Colors.RED}{self.failures} check(s) failed{Colors.END}")
            return 1
        print(f"\n{Colors.GREEN}All checks passed{Colors.END}")
        return 0


async def main() -> int:
    """Entry point"""
    parser = argparse.ArgumentParser(description="Cat Database MCP Test Client")
    parser.add_argument(
        "--server",
        type=Path,
        default=DEFAULT_SERVER,
        help="Path to the MCP server script (default: src/cat_database_mcp/server.py)",
    )
    args = parser.parse_args()

    print(f"{Colors.HEADER}{'=' * 60}{Colors.END}")
    print(f"{Colors.BOLD}Cat Database MCP Test Client{Colors.END}")
    print(f"{Colors.HEADER}{'=' * 60}{Colors.END}")

    return await CatDatabaseClient(args.server).run()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
