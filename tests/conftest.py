import dataclasses
from collections import namedtuple
from types import MappingProxyType, SimpleNamespace

import pytest
from pydantic import BaseModel

import recordview.config


Point = namedtuple("Point", "x y")


@dataclasses.dataclass(frozen=True)
class FrozenItem:
    sku: str
    qty: int


@dataclasses.dataclass
class Item:
    sku: str
    qty: int


class Slotted:
    __slots__ = ("sku", "qty")

    def __init__(self, sku, qty):
        self.sku = sku
        self.qty = qty


class FrozenModel(BaseModel):
    sku: str
    qty: int
    model_config = {"frozen": True}


class Model(BaseModel):
    sku: str
    qty: int


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings and an unread environment."""
    for name in ("RECORDVIEW_LOG_LEVEL", "RECORDVIEW_LEGACY_WARNINGS"):
        # registered, so teardown also drops values loaded from a .env file
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(recordview.config, "_settings", None)
    yield


@pytest.fixture
def sample_record() -> dict:
    return {"sku": "B-200", "name": "bolt", "qty": 120, "bin": "A3"}


@pytest.fixture
def sample_records() -> list:
    return [
        {"sku": "B-200", "name": "bolt"},
        {"sku": "A-100", "name": "anchor"},
        {"sku": "N-300", "name": "nut"},
    ]


@pytest.fixture(
    params=[
        pytest.param(lambda: {"sku": "x"}, id="dict"),
        pytest.param(lambda: SimpleNamespace(sku="x"), id="namespace"),
        pytest.param(lambda: Item("x", 1), id="dataclass"),
        pytest.param(lambda: Model(sku="x", qty=1), id="pydantic"),
    ]
)
def open_record(request):
    return request.param()


@pytest.fixture(
    params=[
        pytest.param(lambda: 42, id="int"),
        pytest.param(lambda: "text", id="str"),
        pytest.param(lambda: ("x", 1), id="tuple"),
        pytest.param(lambda: Point(1, 2), id="namedtuple"),
        pytest.param(lambda: FrozenItem("x", 1), id="frozen-dataclass"),
        pytest.param(lambda: Slotted("x", 1), id="slots"),
        pytest.param(lambda: FrozenModel(sku="x", qty=1), id="frozen-pydantic"),
        pytest.param(lambda: MappingProxyType({"sku": "x"}), id="read-only-mapping"),
        pytest.param(lambda: int, id="builtin-type"),
        pytest.param(lambda: str, id="builtin-str-type"),
    ]
)
def fixed_record(request):
    return request.param()
