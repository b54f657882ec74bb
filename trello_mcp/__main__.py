from trello_mcp.cli import main

main()
