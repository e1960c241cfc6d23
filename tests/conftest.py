from collections.abc import Iterator

import pytest
from fakes import FakeExecutor
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    logger.remove()
    logger.disable("releasegate")


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()
