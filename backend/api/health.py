"""
Vercel serverless function: GET /health
"""
import os
import sys

# Ensure backend root is on path so we can import serverless, routes
_backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_root not in sys.path:
    sys.path.insert(0, _backend_root)

from serverless import make_handler  # noqa: E402

handler = make_handler("/health")
