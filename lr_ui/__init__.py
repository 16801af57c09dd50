"""Terminal UI, flows and CLI for luraph-cli."""
