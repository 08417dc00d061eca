#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from loguru import logger

# Local ----------------------------------------------------------------------------------------------------------------
from byteunit.units import U64_MAX


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def log_messages():
    """Enable byteunit logging and collect formatted DEBUG+ messages for the duration of a test."""
    messages: list[str] = []
    logger.enable("byteunit")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable("byteunit")


@pytest.fixture
def boundary_counts() -> list[int]:
    """Byte counts at and around the edges of the u64 range."""
    return [0, 1, 2 ** 32, 2 ** 63 - 1, 2 ** 63, U64_MAX - 1, U64_MAX]
