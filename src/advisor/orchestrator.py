from __future__ import annotations

from typing import Any

from langgraph.graph import END, StateGraph

from advisor.nodes.generate import build_generate_node
from advisor.nodes.render_prompt import render_prompt_node
from advisor.nodes.segment import segment_node
from advisor.types import AdvisoryState
from framework.llm.client import LLMClient


def build_graph(client: LLMClient) -> Any:
    graph = StateGraph(AdvisoryState)

    graph.add_node("render_prompt", render_prompt_node)
    graph.add_node("generate", build_generate_node(client))
    graph.add_node("segment", segment_node)

    graph.set_entry_point("render_prompt")
    graph.add_edge("render_prompt", "generate")
    graph.add_edge("generate", "segment")
    graph.add_edge("segment", END)

    return graph.compile()
