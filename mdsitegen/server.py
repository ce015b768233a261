"""Static file server for the generated site."""

from __future__ import annotations

import functools
import os
import sys
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional, Sequence, Union

HTML_DIR = "./files/output"
PORT = 8080
READ_TIMEOUT = 5


class _Handler(SimpleHTTPRequestHandler):
    timeout = READ_TIMEOUT


def make_server(
    directory: Union[str, "os.PathLike[str]"], port: int
) -> ThreadingHTTPServer:
    """Create a server that serves `directory` on every interface."""
    handler = functools.partial(_Handler, directory=os.fspath(directory))
    return ThreadingHTTPServer(("", port), handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the generated site until interrupted; arguments are ignored."""
    print(f"Running server: http://localhost:{PORT}")
    print()
    try:
        server = make_server(HTML_DIR, PORT)
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())