import sys

from yapi_mcp.server.main import main

sys.exit(main())
