#!/usr/bin/env python3
"""Run the range toolkit Flask app locally."""

from __future__ import annotations

import logging

from rangelab.webapp import create_app, load_runtime_config

runtime = load_runtime_config()
logging.basicConfig(
    level=getattr(logging, runtime.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
app = create_app(runtime=runtime)


def main() -> None:
    app.run(host=runtime.host, port=runtime.port, debug=runtime.debug)


if __name__ == "__main__":
    main()
