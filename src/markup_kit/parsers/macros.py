# parsers/macros.py

import logging
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import BaseModel

from markup_kit.markup import MarkupNode

logger = logging.getLogger(__name__)


class MacroClassifier(Protocol):
    """Decides which elements are embedded macros and how to read them.

    Markup dialects disagree on how macros are marked up, so the parser
    takes one of these instead of hard-coding the rules.
    """

    def is_macro(self, node: MarkupNode) -> bool: ...

    def macro_name(self, node: MarkupNode) -> str: ...

    def macro_parameters(self, node: MarkupNode) -> dict[str, str]:
        """Parameter name -> text value, read from the macro's descendants."""
        ...


class MacroRules(BaseModel):
    """Declarative rules for AttributeMacroClassifier, loadable from YAML."""

    class_markers: list[str] = ["macro"]
    name_attributes: list[str] = ["data-macro-name", "ac:name"]
    parameter_attributes: list[str] = ["ac:name", "ac:parameter"]
    # Elements that carry a name attribute but should not count as macros,
    # e.g. ["ac:parameter"]
    parameter_tags: list[str] = []
    # Leave nested macros (and their parameters) out of the enclosing
    # macro's parameters
    skip_nested_macros: bool = False

    class Config:
        extra = "forbid"


class AttributeMacroClassifier(MacroClassifier):
    """
    Class/attribute heuristics for Confluence-style markup.

    A node is a macro when its class attribute contains one of the class
    markers, or when it carries one of the name attributes. Export HTML
    uses `class="...-macro"` / `data-macro-name`; storage format uses
    `<ac:structured-macro ac:name="...">`.
    """

    def __init__(self, rules: MacroRules | None = None) -> None:
        self.rules = rules or MacroRules()

    def is_macro(self, node: MarkupNode) -> bool:
        if node.tag in self.rules.parameter_tags:
            return False

        classes = node.get_attribute("class") or ""
        if any(marker in classes for marker in self.rules.class_markers):
            return True
        return any(node.has_attribute(attr) for attr in self.rules.name_attributes)

    def macro_name(self, node: MarkupNode) -> str:
        for attr in self.rules.name_attributes:
            value = node.get_attribute(attr)
            if value:
                return value
        return "unknown"

    def parameter_name(self, node: MarkupNode) -> str | None:
        for attr in self.rules.parameter_attributes:
            value = node.get_attribute(attr)
            if value:
                return value
        return None

    def macro_parameters(self, node: MarkupNode) -> dict[str, str]:
        # Document order; a later parameter with the same name wins
        parameters = {}
        pending = list(reversed(node.children))
        while pending:
            child = pending.pop()
            if self.rules.skip_nested_macros and self.is_macro(child):
                continue
            name = self.parameter_name(child)
            if name:
                parameters[name] = child.text
            pending.extend(reversed(child.children))
        return parameters


def load_macro_classifier(path: str | Path) -> AttributeMacroClassifier:
    """Build a classifier from a YAML rules file.

    Keys not present in the file keep their Confluence defaults.
    """
    logger.info("Loading macro rules from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    rules = MacroRules(**data)
    logger.debug(
        "Macro rules: class_markers=%s, name_attributes=%s",
        rules.class_markers,
        rules.name_attributes,
    )
    return AttributeMacroClassifier(rules)
