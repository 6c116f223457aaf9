#!/usr/bin/env python3
"""Basic usage example"""

import timber
from timber import LoggerBuilder, LogFormat, LogLevel
from timber.core.attributes import Date, FileName, Function, Level, Line, Message


def main():
    # Shared logger through module-level functions
    timber.set_min_level(LogLevel.INFO)
    timber.debug("This is suppressed")
    timber.info("Application started", "version", timber.__version__)
    timber.get_logger().flush()

    # Dedicated logger with its own format
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.ALL)
        .with_format(LogFormat(
            "%s %s [%s:%s %s] %s",
            [Date("yyyy-MM-dd HH:mm:ss.SSS"), Level(),
             FileName(full_path=False, include_extension=False),
             Line(), Function(), Message()],
        ))
        .with_separator(" | ")
        .build())

    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.warn("This is warning", {"retries": 3})
    logger.error("This is error")
    logger.fatal("This is fatal")

    # Quiet everything below ERROR for this file only
    logger.register_file(LogLevel.ERROR)
    logger.info("Not shown")
    logger.error("Shown")

    # Flush and shutdown
    logger.flush()
    logger.shutdown()


if __name__ == "__main__":
    main()
