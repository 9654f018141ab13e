"""Tests for the built-in sync and async adapters."""

import asyncio
import pytest
from typing import List

from treeviz.sync import (
    MappingAdapter,
    NodeAdapter,
    NodeCapabilityError,
    SimpleNode,
    TreeVizError,
    TreeVizNode,
    render,
)
from treeviz.aio import AsyncNodeAdapter, SyncAdapterBridge, render_async
from treeviz.testing import DotDocument


# Test implementations

class PlainNode:
    """Protocol node that does not inherit from anything."""

    def __init__(self, name: str, kids=None):
        self.name = name
        self.kids = kids or []

    def __str__(self) -> str:
        return self.name

    def children(self):
        return iter(self.kids)


class CoroutineNode:
    """Node whose children() is a coroutine function."""

    def __init__(self, name: str, kids=None):
        self.name = name
        self.kids = kids or []

    def __str__(self) -> str:
        return self.name

    async def children(self) -> List['CoroutineNode']:
        await asyncio.sleep(0)
        return self.kids


class StreamingNode:
    """Node whose children() returns an async generator."""

    def __init__(self, name: str, kids=None):
        self.name = name
        self.kids = kids or []

    def __str__(self) -> str:
        return self.name

    async def children(self):
        for kid in self.kids:
            await asyncio.sleep(0)
            yield kid


class Expression(TreeVizNode):
    """Small expression tree built on the abstract base class."""

    def __init__(self, op: str, *operands: 'Expression'):
        self.op = op
        self.operands = list(operands)

    def children(self) -> List['Expression']:
        return self.operands

    def __str__(self) -> str:
        return self.op


MAPPING_TREE = {
    "label": "config",
    "children": [
        {"label": "server", "children": [{"label": "port"}, {"label": "host"}]},
        {"label": "logging"},
    ],
}


# NodeAdapter

def test_node_adapter_reads_protocol_objects():
    adapter = NodeAdapter()
    node = PlainNode("p", [PlainNode("q")])
    assert adapter.get_label(node) == "p"
    assert [str(child) for child in adapter.get_children(node)] == ["q"]
    assert not adapter.is_leaf(node)
    assert adapter.is_leaf(PlainNode("leaf"))


def test_plain_objects_render_without_base_class():
    doc = DotDocument.parse(render("Plain", PlainNode("a", [PlainNode("b"), PlainNode("c")])))
    assert doc.labels == ["a", "b", "c"]


def test_abstract_base_class_nodes():
    tree = Expression("+", Expression("1"), Expression("*", Expression("2"), Expression("3")))
    doc = DotDocument.parse(render("Expr", tree))
    assert doc.labels == ["+", "1", "*", "2", "3"]
    assert tree.is_leaf() is False
    assert repr(tree) == "Expression(label='+')"


def test_node_without_children_rejected():
    with pytest.raises(NodeCapabilityError) as info:
        render("Bad", "just a string")
    assert info.value.capability == "children"
    assert isinstance(info.value, TypeError)
    assert isinstance(info.value, TreeVizError)


def test_simple_node_builder():
    root = SimpleNode("root").add(SimpleNode("a"), SimpleNode("b"))
    assert [str(child) for child in root.children()] == ["a", "b"]
    assert repr(root) == "SimpleNode(label='root')"
    # children() hands out a copy
    root.children().clear()
    assert len(root.nodes) == 2


# MappingAdapter

def test_mapping_adapter_renders_nested_dicts():
    doc = DotDocument.parse(render("Config", MAPPING_TREE, adapter=MappingAdapter()))
    assert doc.labels == ["config", "server", "port", "host", "logging"]
    assert doc.check_invariants() == []


def test_mapping_adapter_custom_keys():
    tree = {"name": "a", "items": [{"name": "b", "items": None}]}
    adapter = MappingAdapter(label_key="name", children_key="items")
    doc = DotDocument.parse(render("Keys", tree, adapter=adapter))
    assert doc.labels == ["a", "b"]


def test_mapping_adapter_stringifies_labels():
    doc = DotDocument.parse(render("Numbers", {"label": 42}, adapter=MappingAdapter()))
    assert doc.labels == ["42"]


def test_mapping_adapter_missing_label():
    with pytest.raises(NodeCapabilityError):
        render("Bad", {"children": []}, adapter=MappingAdapter())


def test_mapping_adapter_rejects_non_mapping():
    with pytest.raises(NodeCapabilityError):
        MappingAdapter().get_children(["not", "a", "mapping"])


# Async adapters

@pytest.mark.asyncio
async def test_async_node_adapter_plain_children():
    adapter = AsyncNodeAdapter()
    node = PlainNode("p", [PlainNode("q")])
    assert await adapter.get_label(node) == "p"
    assert [str(child) for child in await adapter.get_children(node)] == ["q"]


@pytest.mark.asyncio
async def test_async_node_adapter_awaits_coroutine_children():
    tree = CoroutineNode("a", [CoroutineNode("b"), CoroutineNode("c", [CoroutineNode("d")])])
    doc = DotDocument.parse(await render_async("Coro", tree))
    assert doc.labels == ["a", "b", "c", "d"]


@pytest.mark.asyncio
async def test_async_node_adapter_consumes_async_generators():
    tree = StreamingNode("a", [StreamingNode("b"), StreamingNode("c")])
    doc = DotDocument.parse(await render_async("Stream", tree))
    assert doc.labels == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_coroutine_tree_matches_sync_equivalent():
    async_tree = CoroutineNode("a", [CoroutineNode("b"), CoroutineNode("b")])
    sync_tree = PlainNode("a", [PlainNode("b"), PlainNode("b")])
    assert await render_async("Same", async_tree) == render("Same", sync_tree)


@pytest.mark.asyncio
@pytest.mark.parametrize("use_threads", [False, True])
async def test_sync_adapter_bridge(use_threads):
    bridge = SyncAdapterBridge(MappingAdapter(), use_threads=use_threads)
    text = await render_async("Config", MAPPING_TREE, adapter=bridge)
    assert text == render("Config", MAPPING_TREE, adapter=MappingAdapter())


@pytest.mark.asyncio
async def test_adapter_context_manager():
    async with AsyncNodeAdapter() as adapter:
        assert await adapter.get_label(SimpleNode("x")) == "x"
