"""Launch the completion simulator with uvicorn."""
from __future__ import annotations
import argparse
import logging
from dataclasses import replace

import uvicorn

from completion_simulator.common.config import DEFAULT_CONFIG_PATH, Settings, load_settings
from completion_simulator.common.corpus import load_corpus
from completion_simulator.common.logging_setup import setup_logging
from completion_simulator.serve.fastapi_app import create_app

LOGGER = logging.getLogger("completion_simulator.serve.server")

def parse_settings(argv: list[str] | None = None) -> Settings:
    """Settings from the config file and environment, overridden by CLI flags."""
    ap = argparse.ArgumentParser(description="Run the text-completion API simulator")
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML config path")
    ap.add_argument("--host", help="Bind address")
    ap.add_argument("--port", type=int, help="Listening port (default: $PORT or 8081)")
    ap.add_argument("--corpus", help="Corpus text file")
    args = ap.parse_args(argv)

    settings = load_settings(args.config)
    if args.host:
        settings = replace(settings, host=args.host)
    if args.port is not None:
        settings = replace(settings, port=args.port)
    if args.corpus:
        settings = replace(settings, corpus_path=args.corpus)
    return settings

def main(argv: list[str] | None = None) -> None:
    settings = parse_settings(argv)
    setup_logging(settings.log_level)

    corpus = load_corpus(settings.corpus_path)
    LOGGER.info("Loaded %d paragraphs from %s", len(corpus), settings.corpus_path)

    app = create_app(corpus, settings)
    LOGGER.info("Completion simulator listening at http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)

if __name__ == "__main__":
    main()
