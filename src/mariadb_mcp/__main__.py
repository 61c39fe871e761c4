from mariadb_mcp.main import main

main()
