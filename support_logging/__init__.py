"""support-logging — structured log record storage with criteria search and bulk delete."""
