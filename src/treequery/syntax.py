"""Expression-tree builders used as sample data for queries.

Nodes are plain dicts tagged with ``"type"``, the shape a parser for a
small expression language would hand to the engine.
"""

from __future__ import annotations

from typing import Any

from treequery.core.pattern import Any as AnyPattern
from treequery.core.pattern import Array, Bind, Pattern, Record, eq

Node = dict[str, Any]


def Let(name: str, init: Node, body: Node) -> Node:
    return {"type": "Let", "name": name, "init": init, "body": body}


def Var(name: str) -> Node:
    return {"type": "Var", "name": name}


def Call(expr: Node, args: list[Node]) -> Node:
    return {"type": "Call", "expr": expr, "args": args}


def Lambda(params: list[str], body: Node) -> Node:
    return {"type": "Lambda", "params": params, "body": body}


def Num(value: int | float) -> Node:
    return {"type": "Num", "value": value}


def Seq(exprs: list[Node]) -> Node:
    return {"type": "Seq", "exprs": exprs}


def sample_tree() -> Node:
    """``let x = 1 in let y = 2 in (add x y; add y y; add x x)``."""
    return Let(
        "x",
        Num(1),
        Let(
            "y",
            Num(2),
            Seq(
                [
                    Call(Var("add"), [Var("x"), Var("y")]),
                    Call(Var("add"), [Var("y"), Var("y")]),
                    Call(Var("add"), [Var("x"), Var("x")]),
                ]
            ),
        ),
    )


def call_with_first_arg(name: str, bind: str = "call") -> Pattern:
    """Pattern for two-argument calls whose first argument is ``Var(name)``."""
    return Bind(
        bind,
        Record(
            {
                "type": eq("Call"),
                "args": Array([Record({"type": eq("Var"), "name": eq(name)}), AnyPattern()]),
            }
        ),
    )
