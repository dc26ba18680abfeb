"""Starter diagrams, one per diagram kind, written in the notation."""
from __future__ import annotations

from typing import Dict, Optional

from gradiol.compiler import CompiledDiagram, compile_dsl
from gradiol.utils.config import LayoutSettings

DIAGRAM_TYPES: Dict[str, str] = {
    "flowchart": "Flowchart",
    "erd": "ER Diagram",
    "usecase": "Use Case",
    "sequence": "Sequence",
    "mindmap": "Mind Map",
    "blank": "Blank Diagram",
}

_SOURCES: Dict[str, str] = {
    "flowchart": """\
@flowchart "Request Handling"
start "Start Request"
process "Validate Input"
decision "Is Valid?"
process "Log Error"
process "Process Data"
process "Save to DB"
end "Finish"

"Start Request" -> "Validate Input"
"Validate Input" -> "Is Valid?"
"Is Valid?" -> "Log Error" : No
"Is Valid?" -> "Process Data" : Yes
"Process Data" -> "Save to DB"
"Save to DB" -> "Finish"
""",
    "erd": """\
@erd "Customer Orders"
entity "Customer" {
  ID (PK)
  Name
}
entity "Order" {
  OrderID (PK)
  Date
  Total
}
rel "Places" {
  "Customer" 1
  "Order" N
}
""",
    "usecase": """\
@usecase "E-Commerce System"
actor "Customer"
actor "Admin"
usecase "Login"
usecase "Browse Products"
usecase "Place Order"
usecase "Manage Users"

"Customer" -> "Login"
"Customer" -> "Browse Products"
"Customer" -> "Place Order"
"Admin" -> "Login"
"Admin" -> "Manage Users"
""",
    "sequence": """\
@sequence "Request Lifecycle"
lifeline "User"
lifeline "Frontend"
lifeline "API Server"
lifeline "Database"

"User" -> "Frontend" : submit
"Frontend" -> "API Server" : POST /orders
"API Server" -> "Database" : insert
""",
    "mindmap": """\
@mindmap "Project Launch"
start "Project Launch"
process "Marketing"
process "Development"
process "Sales"
process "Budget"
process "Team"
process "Risk"

"Project Launch" -> "Marketing"
"Project Launch" -> "Development"
"Project Launch" -> "Sales"
"Project Launch" -> "Budget"
"Project Launch" -> "Team"
"Project Launch" -> "Risk"
""",
    "blank": """\
@blank "Untitled"
""",
}


class UnknownTemplateError(KeyError):
    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown diagram kind '{self.kind}'; expected one of: {', '.join(DIAGRAM_TYPES)}"


def template_source(kind: str) -> str:
    try:
        return _SOURCES[kind]
    except KeyError:
        raise UnknownTemplateError(kind) from None


def template_diagram(kind: str, config: Optional[LayoutSettings] = None) -> CompiledDiagram:
    return compile_dsl(template_source(kind), config)
