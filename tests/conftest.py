from typing import Optional

import pytest
from pydantic import BaseModel

from fncoerce.codecs.registry import registry
from fncoerce.config import FunctionConfig
from fncoerce.function import Function


class Person(BaseModel):
    name: str
    age: int = 0
    nickname: Optional[str] = None


@pytest.fixture(autouse=True)
def reset_registry():
    # every test starts from the built-in codec paths
    registry.reset()
    yield
    registry.reset()


@pytest.fixture
def person_model():
    return Person


@pytest.fixture
def person(person_model):
    return person_model(name="Ann", age=3)


@pytest.fixture
def make_function():
    def _make(handler, input_type=str, strict=False, **kwargs):
        cfg = FunctionConfig(strict_content_type=strict)
        return Function(handler, input_type=input_type, config=cfg, **kwargs)

    return _make
